from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import ConfigDict, Field

from menu_catalog.core.constants import DECIMAL_PLACES, MAX_TAX_RATE, TAX_RATE_MAX_DIGITS
from menu_catalog.models.category import TaxType
from menu_catalog.schemas.common import CamelModel


class CategoryBase(CamelModel):
    name: str = Field(min_length=1, max_length=120)
    image: str = Field(min_length=1, max_length=500)
    description: str = Field(min_length=1)


class CategoryCreate(CategoryBase):
    tax_applicability: Optional[bool] = None
    tax: Optional[Decimal] = Field(
        default=None, ge=0, le=MAX_TAX_RATE,
        max_digits=TAX_RATE_MAX_DIGITS, decimal_places=DECIMAL_PLACES,
    )
    tax_type: Optional[TaxType] = None


class CategoryUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=120)
    image: Optional[str] = Field(default=None, min_length=1, max_length=500)
    description: Optional[str] = Field(default=None, min_length=1)
    tax_applicability: Optional[bool] = None
    tax: Optional[Decimal] = Field(
        default=None, ge=0, le=MAX_TAX_RATE,
        max_digits=TAX_RATE_MAX_DIGITS, decimal_places=DECIMAL_PLACES,
    )
    tax_type: Optional[TaxType] = None


class CategoryOut(CategoryBase):
    id: str
    tax_applicability: bool
    tax: float
    tax_type: TaxType
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

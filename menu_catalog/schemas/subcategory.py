from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import ConfigDict, Field

from menu_catalog.core.constants import DECIMAL_PLACES, MAX_TAX_RATE, TAX_RATE_MAX_DIGITS
from menu_catalog.schemas.common import CamelModel, CategoryRef


class SubCategoryBase(CamelModel):
    name: str = Field(min_length=1, max_length=120)
    image: str = Field(min_length=1, max_length=500)
    description: str = Field(min_length=1)


class SubCategoryCreate(SubCategoryBase):
    category_id: str = Field(min_length=1)
    # left unset, both tax fields are copied from the parent category
    tax_applicability: Optional[bool] = None
    tax: Optional[Decimal] = Field(
        default=None, ge=0, le=MAX_TAX_RATE,
        max_digits=TAX_RATE_MAX_DIGITS, decimal_places=DECIMAL_PLACES,
    )


class SubCategoryUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=120)
    image: Optional[str] = Field(default=None, min_length=1, max_length=500)
    description: Optional[str] = Field(default=None, min_length=1)
    category_id: Optional[str] = Field(default=None, min_length=1)
    tax_applicability: Optional[bool] = None
    tax: Optional[Decimal] = Field(
        default=None, ge=0, le=MAX_TAX_RATE,
        max_digits=TAX_RATE_MAX_DIGITS, decimal_places=DECIMAL_PLACES,
    )


class SubCategoryOut(SubCategoryBase):
    id: str
    category_id: str
    tax_applicability: bool
    tax: float
    category: Optional[CategoryRef] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import ConfigDict, Field

from menu_catalog.core.constants import AMOUNT_MAX_DIGITS, DECIMAL_PLACES
from menu_catalog.schemas.common import CamelModel, CategoryRef, SubCategoryRef


# non-negative and no finer than the Numeric(12, 2) columns
Money = Annotated[Decimal, Field(ge=0, max_digits=AMOUNT_MAX_DIGITS, decimal_places=DECIMAL_PLACES)]


class ItemBase(CamelModel):
    name: str = Field(min_length=1, max_length=200)
    image: str = Field(min_length=1, max_length=500)
    description: str = Field(min_length=1)


class ItemCreate(ItemBase):
    tax_applicability: Optional[bool] = None
    tax: Optional[Money] = None
    base_amount: Money
    discount: Optional[Money] = None
    category_id: str = Field(min_length=1)
    sub_category_id: Optional[str] = None


class ItemUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    image: Optional[str] = Field(default=None, min_length=1, max_length=500)
    description: Optional[str] = Field(default=None, min_length=1)
    tax_applicability: Optional[bool] = None
    tax: Optional[Money] = None
    base_amount: Optional[Money] = None
    discount: Optional[Money] = None
    category_id: Optional[str] = Field(default=None, min_length=1)
    # an explicit null detaches the item from its sub-category
    sub_category_id: Optional[str] = None


class ItemOut(ItemBase):
    id: str
    tax_applicability: bool
    tax: float
    base_amount: float
    discount: float
    total_amount: float
    category_id: str
    sub_category_id: Optional[str] = None
    category: Optional[CategoryRef] = None
    sub_category: Optional[SubCategoryRef] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

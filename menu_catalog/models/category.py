from __future__ import annotations

import enum
from datetime import datetime
from decimal import Decimal

from sqlalchemy import Boolean, CheckConstraint, DateTime, Enum, Index, Numeric, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from menu_catalog.db.base import Base, new_object_id, utcnow


class TaxType(str, enum.Enum):
    PERCENTAGE = "percentage"
    FIXED = "fixed"
    NONE = "none"


class Category(Base):
    __tablename__ = "categories"

    id: Mapped[str] = mapped_column(String(24), primary_key=True, default=new_object_id)
    name: Mapped[str] = mapped_column(String(120), unique=True, nullable=False)
    image: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    tax_applicability: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    tax: Mapped[Decimal] = mapped_column(Numeric(5, 2), nullable=False, default=0)
    tax_type: Mapped[TaxType] = mapped_column(
        Enum(TaxType, name="tax_type", values_callable=lambda members: [m.value for m in members]),
        nullable=False,
        default=TaxType.NONE,
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )

    __table_args__ = (
        CheckConstraint("tax >= 0 AND tax <= 100", name="ck_categories_tax_range"),
        Index("ix_categories_lower_name", func.lower(name)),
    )

    subcategories = relationship("SubCategory", back_populates="category")
    items = relationship("Item", back_populates="category")

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlalchemy import Boolean, CheckConstraint, DateTime, ForeignKey, Index, Numeric, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from menu_catalog.db.base import Base, new_object_id, utcnow


class Item(Base):
    __tablename__ = "items"

    id: Mapped[str] = mapped_column(String(24), primary_key=True, default=new_object_id)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    image: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    tax_applicability: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    tax: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False, default=0)
    base_amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    discount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False, default=0)
    # derived; written only from pricing.total_amount
    total_amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    category_id: Mapped[str] = mapped_column(String(24), ForeignKey("categories.id"), nullable=False)
    sub_category_id: Mapped[str | None] = mapped_column(
        String(24), ForeignKey("sub_categories.id"), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )

    __table_args__ = (
        CheckConstraint("tax >= 0", name="ck_items_tax_non_negative"),
        CheckConstraint("base_amount >= 0", name="ck_items_base_amount_non_negative"),
        CheckConstraint("discount >= 0", name="ck_items_discount_non_negative"),
        Index("ix_items_lower_name", func.lower(name)),
        Index("ix_items_category_sub_category", "category_id", "sub_category_id"),
    )

    category = relationship("Category", back_populates="items")
    sub_category = relationship("SubCategory", back_populates="items")

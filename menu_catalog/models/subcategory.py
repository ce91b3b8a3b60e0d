from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlalchemy import Boolean, CheckConstraint, DateTime, ForeignKey, Index, Numeric, String, Text, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from menu_catalog.db.base import Base, new_object_id, utcnow


class SubCategory(Base):
    __tablename__ = "sub_categories"

    id: Mapped[str] = mapped_column(String(24), primary_key=True, default=new_object_id)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    image: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    category_id: Mapped[str] = mapped_column(String(24), ForeignKey("categories.id"), nullable=False)
    tax_applicability: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    tax: Mapped[Decimal] = mapped_column(Numeric(5, 2), nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )

    __table_args__ = (
        UniqueConstraint("category_id", "name", name="uq_sub_category_category_name"),
        CheckConstraint("tax >= 0 AND tax <= 100", name="ck_sub_categories_tax_range"),
        Index("ix_sub_categories_lower_name", func.lower(name)),
    )

    category = relationship("Category", back_populates="subcategories")
    items = relationship("Item", back_populates="sub_category")

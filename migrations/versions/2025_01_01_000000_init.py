"""initial catalog schema

Revision ID: 20250101000000
Revises: 
Create Date: 2025-01-01 00:00:00
"""
from __future__ import annotations

import sqlalchemy as sa
from alembic import op


revision = "20250101000000"
down_revision = None
branch_labels = None
depends_on = None

tax_type = sa.Enum("percentage", "fixed", "none", name="tax_type")


def upgrade() -> None:
    op.create_table(
        "categories",
        sa.Column("id", sa.String(length=24), primary_key=True),
        sa.Column("name", sa.String(length=120), nullable=False, unique=True),
        sa.Column("image", sa.String(length=500), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("tax_applicability", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("tax", sa.Numeric(5, 2), nullable=False, server_default="0"),
        sa.Column("tax_type", tax_type, nullable=False, server_default="none"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("tax >= 0 AND tax <= 100", name="ck_categories_tax_range"),
    )
    op.create_index("ix_categories_lower_name", "categories", [sa.text("lower(name)")], unique=False)

    op.create_table(
        "sub_categories",
        sa.Column("id", sa.String(length=24), primary_key=True),
        sa.Column("name", sa.String(length=120), nullable=False),
        sa.Column("image", sa.String(length=500), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("category_id", sa.String(length=24), sa.ForeignKey("categories.id"), nullable=False),
        sa.Column("tax_applicability", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("tax", sa.Numeric(5, 2), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("category_id", "name", name="uq_sub_category_category_name"),
        sa.CheckConstraint("tax >= 0 AND tax <= 100", name="ck_sub_categories_tax_range"),
    )
    op.create_index("ix_sub_categories_lower_name", "sub_categories", [sa.text("lower(name)")], unique=False)

    op.create_table(
        "items",
        sa.Column("id", sa.String(length=24), primary_key=True),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("image", sa.String(length=500), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("tax_applicability", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("tax", sa.Numeric(12, 2), nullable=False, server_default="0"),
        sa.Column("base_amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("discount", sa.Numeric(12, 2), nullable=False, server_default="0"),
        sa.Column("total_amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("category_id", sa.String(length=24), sa.ForeignKey("categories.id"), nullable=False),
        sa.Column("sub_category_id", sa.String(length=24), sa.ForeignKey("sub_categories.id"), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("tax >= 0", name="ck_items_tax_non_negative"),
        sa.CheckConstraint("base_amount >= 0", name="ck_items_base_amount_non_negative"),
        sa.CheckConstraint("discount >= 0", name="ck_items_discount_non_negative"),
    )
    op.create_index("ix_items_lower_name", "items", [sa.text("lower(name)")], unique=False)
    op.create_index("ix_items_category_sub_category", "items", ["category_id", "sub_category_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_items_category_sub_category", table_name="items")
    op.drop_index("ix_items_lower_name", table_name="items")
    op.drop_table("items")
    op.drop_index("ix_sub_categories_lower_name", table_name="sub_categories")
    op.drop_table("sub_categories")
    op.drop_index("ix_categories_lower_name", table_name="categories")
    op.drop_table("categories")
    tax_type.drop(op.get_bind(), checkfirst=True)

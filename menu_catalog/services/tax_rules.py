"""Tax defaults for each level of the hierarchy.

Categories own a tax policy. Sub-categories copy the parent's policy once,
when they are created; later edits to the category are not propagated.
Items never inherit and start from ``False``/``0``.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from menu_catalog.models.category import Category, TaxType

ZERO = Decimal("0")


@dataclass(frozen=True, slots=True)
class EffectiveTax:
    tax_applicability: bool
    tax: Decimal


def category_tax_settings(
    tax_applicability: bool | None,
    tax: Decimal | None,
    tax_type: TaxType | None,
) -> tuple[EffectiveTax, TaxType]:
    applicable = bool(tax_applicability)
    if not applicable:
        return EffectiveTax(False, ZERO), TaxType.NONE
    return EffectiveTax(True, tax or ZERO), tax_type or TaxType.PERCENTAGE


def resolve_subcategory_tax(
    parent: Category,
    tax_applicability: bool | None,
    tax: Decimal | None,
) -> EffectiveTax:
    """Fill unset tax fields of a new sub-category from its parent category.

    Each field is resolved on its own, except that an explicit
    ``tax_applicability=False`` without a ``tax`` yields a zero rate rather
    than the parent's.
    """

    applicable = parent.tax_applicability if tax_applicability is None else tax_applicability
    if tax is not None:
        rate = tax
    elif tax_applicability is False:
        rate = ZERO
    else:
        rate = parent.tax
    return EffectiveTax(bool(applicable), Decimal(rate))


def item_tax_settings(tax_applicability: bool | None, tax: Decimal | None) -> EffectiveTax:
    if not tax_applicability:
        return EffectiveTax(False, ZERO)
    return EffectiveTax(True, tax or ZERO)

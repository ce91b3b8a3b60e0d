from __future__ import annotations

from decimal import Decimal
from typing import Any

from menu_catalog.models.item import Item

AMOUNT_FIELDS = ("base_amount", "discount")


def total_amount(base_amount: Decimal, discount: Decimal | None) -> Decimal:
    # no floor: a discount larger than the base amount gives a negative total
    return Decimal(base_amount) - Decimal(discount or 0)


def amounts_for_update(item: Item, changes: dict[str, Any]) -> dict[str, Decimal]:
    """Amount columns to write for a partial update.

    Empty when the update carries neither ``base_amount`` nor ``discount``;
    otherwise the absent one is taken from the stored row and the total is
    recomputed.
    """

    if not any(field in changes for field in AMOUNT_FIELDS):
        return {}
    base_amount = changes.get("base_amount", item.base_amount)
    discount = changes.get("discount", item.discount)
    return {
        "base_amount": Decimal(base_amount),
        "discount": Decimal(discount),
        "total_amount": total_amount(base_amount, discount),
    }

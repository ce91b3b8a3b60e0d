from decimal import Decimal

import pytest

from menu_catalog.models import Item
from menu_catalog.services.pricing import amounts_for_update, total_amount


def _item(base="100", discount="15"):
    return Item(base_amount=Decimal(base), discount=Decimal(discount), total_amount=Decimal(base) - Decimal(discount))


def test_total_is_base_minus_discount():
    assert total_amount(Decimal("100"), Decimal("15")) == Decimal("85")


def test_missing_discount_counts_as_zero():
    assert total_amount(Decimal("40"), None) == Decimal("40")


def test_discount_larger_than_base_goes_negative():
    assert total_amount(Decimal("10"), Decimal("25")) == Decimal("-15")


def test_update_without_amount_fields_changes_nothing():
    assert amounts_for_update(_item(), {"name": "Mocha"}) == {}


@pytest.mark.parametrize(
    ("changes", "expected_total"),
    [
        ({"base_amount": Decimal("200")}, Decimal("185")),
        ({"discount": Decimal("50")}, Decimal("50")),
        ({"base_amount": Decimal("60"), "discount": Decimal("10")}, Decimal("50")),
    ],
)
def test_update_uses_stored_value_for_absent_field(changes, expected_total):
    amounts = amounts_for_update(_item(), changes)
    assert amounts["total_amount"] == expected_total
    assert amounts["total_amount"] == amounts["base_amount"] - amounts["discount"]

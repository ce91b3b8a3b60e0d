from menu_catalog.models.category import Category, TaxType
from menu_catalog.models.item import Item
from menu_catalog.models.subcategory import SubCategory

__all__ = [
    "Category",
    "TaxType",
    "Item",
    "SubCategory",
]

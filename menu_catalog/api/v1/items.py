from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from menu_catalog.core.deps import get_db
from menu_catalog.schemas.envelope import envelope
from menu_catalog.schemas.item import ItemCreate, ItemOut, ItemUpdate
from menu_catalog.services import item_service

router = APIRouter(prefix="/items", tags=["items"])


@router.post("/", status_code=status.HTTP_201_CREATED)
def create_item(payload: ItemCreate, db: Session = Depends(get_db)):
    item = item_service.create_item(db, payload)
    return envelope(ItemOut.model_validate(item), message="Item created successfully")


@router.get("/")
def list_items(db: Session = Depends(get_db)):
    items = [ItemOut.model_validate(i) for i in item_service.list_items(db)]
    return envelope(items, count=len(items))


@router.get("/search")
def search_items(name: str | None = Query(default=None), db: Session = Depends(get_db)):
    items = [ItemOut.model_validate(i) for i in item_service.search_items(db, name)]
    return envelope(items, count=len(items), searchQuery=name.strip())


@router.get("/category/{category_id}")
def list_items_for_category(category_id: str, db: Session = Depends(get_db)):
    category, items = item_service.list_for_category(db, category_id)
    data = [ItemOut.model_validate(i) for i in items]
    return envelope(data, count=len(data), category=category.name)


@router.get("/subcategory/{sub_category_id}")
def list_items_for_subcategory(sub_category_id: str, db: Session = Depends(get_db)):
    sub, items = item_service.list_for_subcategory(db, sub_category_id)
    data = [ItemOut.model_validate(i) for i in items]
    return envelope(data, count=len(data), category=sub.category.name, subCategory=sub.name)


@router.get("/{identifier}")
def get_item(identifier: str, db: Session = Depends(get_db)):
    return envelope(ItemOut.model_validate(item_service.get_item(db, identifier)))


@router.put("/{item_id}")
def update_item(item_id: str, payload: ItemUpdate, db: Session = Depends(get_db)):
    item = item_service.update_item(db, item_id, payload)
    return envelope(ItemOut.model_validate(item), message="Item updated successfully")


@router.delete("/{item_id}")
def delete_item(item_id: str, db: Session = Depends(get_db)):
    item_service.delete_item(db, item_id)
    return envelope(message="Item deleted successfully")

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from menu_catalog.core.deps import get_db
from menu_catalog.schemas.category import CategoryCreate, CategoryOut, CategoryUpdate
from menu_catalog.schemas.envelope import envelope
from menu_catalog.services import category_service

router = APIRouter(prefix="/categories", tags=["categories"])


@router.post("/", status_code=status.HTTP_201_CREATED)
def create_category(payload: CategoryCreate, db: Session = Depends(get_db)):
    category = category_service.create_category(db, payload)
    return envelope(CategoryOut.model_validate(category), message="Category created successfully")


@router.get("/")
def list_categories(db: Session = Depends(get_db)):
    categories = [CategoryOut.model_validate(c) for c in category_service.list_categories(db)]
    return envelope(categories, count=len(categories))


@router.get("/{identifier}")
def get_category(identifier: str, db: Session = Depends(get_db)):
    return envelope(CategoryOut.model_validate(category_service.get_category(db, identifier)))


@router.put("/{category_id}")
def update_category(category_id: str, payload: CategoryUpdate, db: Session = Depends(get_db)):
    category = category_service.update_category(db, category_id, payload)
    return envelope(CategoryOut.model_validate(category), message="Category updated successfully")


@router.delete("/{category_id}")
def delete_category(category_id: str, db: Session = Depends(get_db)):
    category_service.delete_category(db, category_id)
    return envelope(message="Category deleted successfully")

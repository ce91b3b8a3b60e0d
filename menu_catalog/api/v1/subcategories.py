from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from menu_catalog.core.deps import get_db
from menu_catalog.schemas.envelope import envelope
from menu_catalog.schemas.subcategory import SubCategoryCreate, SubCategoryOut, SubCategoryUpdate
from menu_catalog.services import subcategory_service

router = APIRouter(prefix="/subcategories", tags=["subcategories"])


@router.post("/", status_code=status.HTTP_201_CREATED)
def create_subcategory(payload: SubCategoryCreate, db: Session = Depends(get_db)):
    sub = subcategory_service.create_subcategory(db, payload)
    return envelope(SubCategoryOut.model_validate(sub), message="Sub-category created successfully")


@router.get("/")
def list_subcategories(db: Session = Depends(get_db)):
    subs = [SubCategoryOut.model_validate(s) for s in subcategory_service.list_subcategories(db)]
    return envelope(subs, count=len(subs))


# registered before "/{identifier}" so "category" is not read as a name
@router.get("/category/{category_id}")
def list_subcategories_for_category(category_id: str, db: Session = Depends(get_db)):
    category, subs = subcategory_service.list_for_category(db, category_id)
    data = [SubCategoryOut.model_validate(s) for s in subs]
    return envelope(data, count=len(data), category=category.name)


@router.get("/{identifier}")
def get_subcategory(identifier: str, db: Session = Depends(get_db)):
    return envelope(SubCategoryOut.model_validate(subcategory_service.get_subcategory(db, identifier)))


@router.put("/{sub_id}")
def update_subcategory(sub_id: str, payload: SubCategoryUpdate, db: Session = Depends(get_db)):
    sub = subcategory_service.update_subcategory(db, sub_id, payload)
    return envelope(SubCategoryOut.model_validate(sub), message="Sub-category updated successfully")


@router.delete("/{sub_id}")
def delete_subcategory(sub_id: str, db: Session = Depends(get_db)):
    subcategory_service.delete_subcategory(db, sub_id)
    return envelope(message="Sub-category deleted successfully")

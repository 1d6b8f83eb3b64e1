from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from blog_api.services.db_service import get_db
from blog_api.schemas.category_schema import CategoryCreate, CategoryOut
from blog_api.services.category_service import category_service

router = APIRouter()
admin_router = APIRouter()

# CATEGORY 조회 (최신순)
@router.get("", response_model=List[CategoryOut])
def list_categories(db: Session = Depends(get_db)):
    return category_service.find_all_categories(db)

# CATEGORY 생성
@admin_router.post("", response_model=CategoryOut, status_code=status.HTTP_201_CREATED)
def create_category(payload: CategoryCreate, db: Session = Depends(get_db)):
    return category_service.create_category(db, payload)

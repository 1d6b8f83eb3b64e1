from typing import Iterable, List

from loguru import logger
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from blog_api.common.exceptions import FieldValidationError
from blog_api.models.post import Category
from blog_api.schemas.category_schema import CategoryCreate
from blog_api.services.db_service import store_guard


class CategoryService:

    # Category 조회 (최신순)
    def find_all_categories(self, db: Session) -> List[Category]:
        logger.info("[CategoryService] Method : find_all_categories")
        with store_guard(db, "find_all_categories"):
            stmt = select(Category).order_by(Category.created_at.desc(), Category.id.desc())
            return list(db.scalars(stmt).all())

    def find_categories_by_ids(self, db: Session, category_ids: Iterable[str]) -> List[Category]:
        ids = list(category_ids)
        if not ids:
            return []
        with store_guard(db, "find_categories_by_ids"):
            stmt = select(Category).where(Category.id.in_(ids))
            return list(db.scalars(stmt).all())

    # Category 생성
    def create_category(self, db: Session, payload: CategoryCreate) -> Category:
        logger.info("[CategoryService] Method : create_category")
        with store_guard(db, "create_category"):
            exists = db.scalars(select(Category).where(Category.name == payload.name)).first()
            if exists:
                raise FieldValidationError("name", f"category '{payload.name}' already exists")
            category = Category(name=payload.name)
            db.add(category)
            try:
                db.commit()
            except IntegrityError as e:
                # 확인 후 커밋 사이에 같은 이름이 먼저 들어온 경우 (unique 제약)
                db.rollback()
                logger.warning("[CategoryService] duplicate name on commit: {}", payload.name)
                raise FieldValidationError("name", f"category '{payload.name}' already exists") from e
            db.refresh(category)
            logger.info("[CategoryService] created category id={} name={}", category.id, category.name)
            return category


category_service = CategoryService()

from typing import Iterable, List, Optional

from loguru import logger
from sqlalchemy import select
from sqlalchemy.orm import Session

from blog_api.common.exceptions import FieldValidationError, NotFoundError
from blog_api.models.post import Category, Post, PostCategory
from blog_api.schemas.post_schema import PostCreate, PostUpdate
from blog_api.services.category_service import CategoryService, category_service
from blog_api.services.db_service import store_guard


class PostService:
    """
    Post 저장소 쿼리 모음.
    공개/관리자 경로의 차이는 published_only 하나로만 표현하고,
    호출부마다 쿼리를 따로 만들지 않습니다.
    """

    def __init__(self, categories: Optional[CategoryService] = None):
        self.categories = categories or category_service

    @staticmethod
    def _base_query(published_only: bool):
        stmt = select(Post)
        if published_only:
            stmt = stmt.where(Post.published.is_(True))
        return stmt

    # ---------- 조회 ----------
    def find_post_by_id(self, db: Session, post_id: str, *, published_only: bool = False) -> Optional[Post]:
        logger.debug("[PostService] find_post_by_id id={} published_only={}", post_id, published_only)
        with store_guard(db, "find_post_by_id"):
            stmt = self._base_query(published_only).where(Post.id == post_id)
            return db.scalars(stmt).first()

    def find_many_posts(self, db: Session, *, published_only: bool) -> List[Post]:
        logger.info("[PostService] Method : find_many_posts published_only={}", published_only)
        with store_guard(db, "find_many_posts"):
            stmt = self._base_query(published_only).order_by(Post.created_at.desc())
            return list(db.scalars(stmt).all())

    def find_related_candidates(
        self,
        db: Session,
        *,
        exclude_id: str,
        category_ids: Iterable[str],
        limit: int,
        published_only: bool = True,
    ) -> List[Post]:
        ids = sorted(set(category_ids))
        if not ids or limit <= 0:
            return []
        with store_guard(db, "find_related_candidates"):
            stmt = (
                self._base_query(published_only)
                .where(
                    Post.id != exclude_id,
                    Post.category_links.any(PostCategory.category_id.in_(ids)),
                )
                .order_by(Post.created_at.desc())
                .limit(limit)
            )
            return list(db.scalars(stmt).all())

    # ---------- 쓰기 ----------
    def _resolve_categories(self, db: Session, category_ids: List[str]) -> List[Category]:
        if not category_ids:
            raise FieldValidationError("category_ids", "at least one category is required")
        found = {c.id: c for c in self.categories.find_categories_by_ids(db, category_ids)}
        missing = [cid for cid in category_ids if cid not in found]
        if missing:
            raise FieldValidationError("category_ids", f"unknown category id(s): {', '.join(missing)}")
        # 요청 순서 유지, 중복 제거
        return [found[cid] for cid in dict.fromkeys(category_ids)]

    @staticmethod
    def _links(categories: List[Category]) -> List[PostCategory]:
        return [PostCategory(category=c) for c in categories]

    def _get_or_raise(self, db: Session, post_id: str) -> Post:
        post = self.find_post_by_id(db, post_id)
        if post is None:
            raise NotFoundError("Post", post_id)
        return post

    def create_post(self, db: Session, payload: PostCreate) -> Post:
        logger.info("[PostService] Method : create_post")
        categories = self._resolve_categories(db, payload.category_ids)
        post = Post(
            title=payload.title,
            content=payload.content,
            cover_image_url=str(payload.cover_image_url),
            published=payload.published,
            category_links=self._links(categories),
        )
        with store_guard(db, "create_post"):
            db.add(post)
            db.commit()
            db.refresh(post)
        logger.info("[PostService] created post id={} published={}", post.id, post.published)
        return post

    def update_post(self, db: Session, post_id: str, payload: PostUpdate) -> Post:
        logger.info("[PostService] Method : update_post id={}", post_id)
        post = self._get_or_raise(db, post_id)
        categories = self._resolve_categories(db, payload.category_ids)
        with store_guard(db, "update_post"):
            post.title = payload.title
            post.content = payload.content
            post.cover_image_url = str(payload.cover_image_url)
            post.published = payload.published
            # 카테고리는 통째로 교체: 기존 조인 행을 먼저 지워야 같은 (post, category) 재삽입이 충돌하지 않음
            post.category_links.clear()
            db.flush()
            # 새 조인 행은 flush 이후에 생성 (이전 flush 에 끼어들지 않도록)
            post.category_links.extend(self._links(categories))
            db.commit()
            db.refresh(post)
        return post

    def set_published(self, db: Session, post_id: str, published: bool) -> Post:
        post = self._get_or_raise(db, post_id)
        if post.published == published:
            logger.debug("[PostService] set_published no-op id={} published={}", post_id, published)
            return post
        with store_guard(db, "set_published"):
            post.published = published
            db.commit()
            db.refresh(post)
        logger.info("[PostService] id={} published={}", post_id, published)
        return post

    def delete_post(self, db: Session, post_id: str) -> str:
        logger.info("[PostService] Method : delete_post id={}", post_id)
        post = self._get_or_raise(db, post_id)
        with store_guard(db, "delete_post"):
            db.delete(post)
            db.commit()
        return post_id


post_service = PostService()

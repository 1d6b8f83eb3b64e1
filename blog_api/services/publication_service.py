from typing import List, Optional

from loguru import logger
from sqlalchemy.orm import Session

from blog_api.common.exceptions import NotFoundError
from blog_api.models.post import Post
from blog_api.services.post_service import PostService, post_service


class PublicationService:
    """
    공개/관리자 경로별 노출 범위 관리.
    - 공개: published 글만
    - 관리자: 전부 (공개 범위의 상위집합)
    draft <-> published 전이는 publish/unpublish 두 가지뿐이며, 같은 상태로의 전이는 no-op.
    """

    def __init__(self, posts: Optional[PostService] = None):
        self.posts = posts or post_service

    # ---------- 목록 ----------
    def list_public(self, db: Session) -> List[Post]:
        return self.posts.find_many_posts(db, published_only=True)

    def list_admin(self, db: Session) -> List[Post]:
        return self.posts.find_many_posts(db, published_only=False)

    # ---------- 단건 ----------
    def get_public_by_id(self, db: Session, post_id: str) -> Post:
        post = self.posts.find_post_by_id(db, post_id, published_only=True)
        if post is None:
            # draft 와 미존재를 구분하지 않음
            raise NotFoundError("Post", post_id)
        return post

    def get_admin_by_id(self, db: Session, post_id: str) -> Post:
        post = self.posts.find_post_by_id(db, post_id, published_only=False)
        if post is None:
            raise NotFoundError("Post", post_id)
        return post

    # ---------- 상태 전이 ----------
    def publish(self, db: Session, post_id: str) -> Post:
        logger.info("[PublicationService] publish id={}", post_id)
        return self.posts.set_published(db, post_id, True)

    def unpublish(self, db: Session, post_id: str) -> Post:
        logger.info("[PublicationService] unpublish id={}", post_id)
        return self.posts.set_published(db, post_id, False)


publication_service = PublicationService()

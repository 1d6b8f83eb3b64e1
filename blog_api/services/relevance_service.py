from typing import List, Optional

from loguru import logger
from sqlalchemy.orm import Session

from blog_api.models.post import Post
from blog_api.services.post_service import PostService, post_service
from blog_api.settings import settings


class RelevanceService:
    """
    관련 글 선정.
    - 자기 자신 제외, 공개 글만, 카테고리를 하나 이상 공유
    - created_at 최신순, 최대 limit 개 (같은 시각끼리의 순서는 보장하지 않음)
    - 무작위/개인화 없음
    """

    def __init__(self, posts: Optional[PostService] = None):
        self.posts = posts or post_service

    def find_related(self, db: Session, post: Post, limit: Optional[int] = None) -> List[Post]:
        limit = settings.RELATED_POSTS_LIMIT if limit is None else limit
        category_ids = post.category_ids
        if not category_ids:
            # 카테고리가 없으면 공유할 카테고리도 없음
            return []
        related = self.posts.find_related_candidates(
            db,
            exclude_id=post.id,
            category_ids=category_ids,
            limit=limit,
            published_only=True,
        )
        logger.debug("[RelevanceService] post={} related={}", post.id, [p.id for p in related])
        return related


relevance_service = RelevanceService()

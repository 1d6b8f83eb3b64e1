from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List

from blog_api.services.db_service import get_db
from blog_api.schemas.post_schema import DisplayPost, PostDetailOut, RelatedPostOut
from blog_api.services.post_transformer import to_display_post, to_display_posts
from blog_api.services.publication_service import publication_service
from blog_api.services.relevance_service import relevance_service
from blog_api.settings import settings
from blog_api.utils.html_sanitizer import sanitize

router = APIRouter()


def _render(post: DisplayPost) -> DisplayPost:
    # 공개 응답 직전에만 본문 정화
    return post.model_copy(update={"content": sanitize(post.content)})


# 공개 글 목록 (최신순)
@router.get("", response_model=List[DisplayPost])
def list_posts(db: Session = Depends(get_db)):
    posts = publication_service.list_public(db)
    return [_render(p) for p in to_display_posts(posts)]

# 공개 글 단건 + 관련 글
@router.get("/{post_id}", response_model=PostDetailOut)
def get_post(post_id: str, db: Session = Depends(get_db)):
    post = publication_service.get_public_by_id(db, post_id)
    related = relevance_service.find_related(db, post, settings.RELATED_POSTS_LIMIT)
    display = _render(to_display_post(post))
    return PostDetailOut(
        **display.model_dump(),
        related_posts=[RelatedPostOut.model_validate(r) for r in related],
    )

# 관련 글만
@router.get("/{post_id}/related", response_model=List[RelatedPostOut])
def get_related_posts(
    post_id: str,
    limit: int = Query(settings.RELATED_POSTS_LIMIT, ge=1, le=20),
    db: Session = Depends(get_db),
):
    post = publication_service.get_public_by_id(db, post_id)
    return relevance_service.find_related(db, post, limit)

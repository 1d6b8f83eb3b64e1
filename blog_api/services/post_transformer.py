from __future__ import annotations
from typing import Iterable, List

from blog_api.models.post import Post
from blog_api.schemas.category_schema import CategoryRef
from blog_api.schemas.post_schema import DisplayPost
from blog_api.settings import settings
from blog_api.utils.reading_time import estimate_minutes


def to_display_post(post: Post) -> DisplayPost:
    # content 는 원문 그대로 전달. 정화(sanitize)는 응답 직전에 소비자별로 적용
    return DisplayPost(
        id=post.id,
        title=post.title,
        content=post.content,
        cover_image_url=post.cover_image_url,
        published=post.published,
        visibility=post.visibility,
        created_at=post.created_at,
        categories=[CategoryRef(id=c.id, name=c.name) for c in post.categories],
        reading_time_minutes=estimate_minutes(post.content, settings.READING_CHARS_PER_MINUTE),
    )


def to_display_posts(posts: Iterable[Post]) -> List[DisplayPost]:
    return [to_display_post(p) for p in posts]

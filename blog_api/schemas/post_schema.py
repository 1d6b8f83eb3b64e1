# schemas/post_schema.py
from pydantic import BaseModel, Field, HttpUrl, field_validator
from datetime import datetime
from typing import List

from blog_api.models.enums import PostVisibility
from blog_api.schemas.category_schema import CategoryRef

TITLE_MAX_LEN = 100


def _dedupe_preserve(ids: List[str]) -> List[str]:
    seen = set()
    out = []
    for cid in ids:
        cid = cid.strip()
        if cid and cid not in seen:
            seen.add(cid)
            out.append(cid)
    return out


class PostWrite(BaseModel):
    """
    생성/수정 공용 입력. PUT 은 전체 교체이므로 생성과 같은 필드를 요구합니다.
    - title: 1~100자, 공백만은 불가
    - content: 비어있으면 불가
    - cover_image_url: http(s) 절대 URL
    - category_ids: 최소 1개 (중복은 하나로 합침)
    """
    title: str = Field(min_length=1, max_length=TITLE_MAX_LEN)
    content: str = Field(min_length=1)
    cover_image_url: HttpUrl
    category_ids: List[str] = Field(min_length=1)
    published: bool = False

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title must not be blank")
        return v

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("content must not be blank")
        return v

    @field_validator("category_ids")
    @classmethod
    def normalize_category_ids(cls, v: List[str]) -> List[str]:
        ids = _dedupe_preserve(v)
        if not ids:
            raise ValueError("at least one category is required")
        return ids


class PostCreate(PostWrite):
    pass


class PostUpdate(PostWrite):
    pass


class PostOut(BaseModel):
    id: str
    title: str
    content: str
    cover_image_url: str
    published: bool
    visibility: PostVisibility
    created_at: datetime
    categories: List[CategoryRef]

    model_config = {"from_attributes": True}


class DisplayPost(PostOut):
    reading_time_minutes: int


class RelatedPostOut(BaseModel):
    id: str
    title: str
    cover_image_url: str
    created_at: datetime
    categories: List[CategoryRef]

    model_config = {"from_attributes": True}


class PostDetailOut(DisplayPost):
    related_posts: List[RelatedPostOut] = []

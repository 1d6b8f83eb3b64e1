from blog_api.db import Base  # 같은 Base 공유

# 등록용 임포트 (누락되면 create_all 에서 테이블이 빠집니다)
from .enums import PostVisibility
from .post import Category, Post, PostCategory

__all__ = [
    "Base",
    "Category", "Post", "PostCategory",
    "PostVisibility",
]

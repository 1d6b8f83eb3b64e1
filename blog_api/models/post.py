from sqlalchemy.orm import relationship, Mapped, mapped_column
from sqlalchemy import String, Text, Boolean, DateTime, ForeignKey, Index
from sqlalchemy.dialects import mysql
from datetime import datetime, timezone
import uuid

from blog_api.db import Base
from blog_api.models.enums import PostVisibility


def _new_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    # 마이크로초 단위 UTC (최신순 정렬 기준)
    return datetime.now(timezone.utc)


# MySQL DATETIME 기본은 초 단위라 fsp=6 으로 마이크로초 보존
Timestamp = DateTime(timezone=True).with_variant(mysql.DATETIME(fsp=6), "mysql")


class Category(Base):
    __tablename__ = "categories"
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    created_at: Mapped[datetime] = mapped_column(Timestamp, nullable=False, default=_utcnow)

    post_links: Mapped[list["PostCategory"]] = relationship(back_populates="category")


class Post(Base):
    __tablename__ = "posts"
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    title: Mapped[str] = mapped_column(String(100), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    cover_image_url: Mapped[str] = mapped_column(String(2048), nullable=False)
    published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(Timestamp, nullable=False, default=_utcnow)

    # 글 삭제 시 조인 행도 함께 삭제
    category_links: Mapped[list["PostCategory"]] = relationship(
        back_populates="post",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    @property
    def categories(self) -> list["Category"]:
        return [link.category for link in self.category_links]

    @property
    def visibility(self) -> PostVisibility:
        return PostVisibility.from_flag(self.published)

    @property
    def category_ids(self) -> set[str]:
        return {link.category_id for link in self.category_links}

Index("idx_posts_published_created", Post.published, Post.created_at)


class PostCategory(Base):
    __tablename__ = "post_categories"

    # (post_id, category_id) 복합 PK → 중복 조인 행 불가
    post_id: Mapped[str] = mapped_column(
        ForeignKey("posts.id", ondelete="CASCADE"), primary_key=True
    )
    # 참조 중인 카테고리 삭제는 저장소에서 거부
    category_id: Mapped[str] = mapped_column(
        ForeignKey("categories.id", ondelete="RESTRICT"), primary_key=True, index=True
    )

    post: Mapped["Post"] = relationship(back_populates="category_links")
    category: Mapped["Category"] = relationship(back_populates="post_links", lazy="joined")

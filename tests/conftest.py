"""
conftest.py
-----------
Shared pytest fixtures for blog API tests.

Provides:
- In-memory SQLite engine/session with the full schema
- TestClient bound to that session
- Factories for categories and posts with explicit timestamps
"""
from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from blog_api.db import Base, configure_engine
from blog_api.main import app
from blog_api.models import Category, Post, PostCategory
from blog_api.services.db_service import get_db


BASE_TIME = datetime(2024, 1, 1, 9, 0, 0, tzinfo=timezone.utc)


# ----- Database Fixtures -----

@pytest.fixture
def engine():
    """Fresh in-memory database per test."""
    eng = configure_engine(
        create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    )
    Base.metadata.create_all(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def db_session(engine):
    SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db_session):
    """TestClient whose requests share the test session."""
    def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


# ----- Factories -----

@pytest.fixture
def base_time():
    return BASE_TIME


@pytest.fixture
def make_category(db_session):
    counter = {"n": 0}

    def _make(name: str, created_at: Optional[datetime] = None) -> Category:
        counter["n"] += 1
        category = Category(
            name=name,
            created_at=created_at or BASE_TIME + timedelta(minutes=counter["n"]),
        )
        db_session.add(category)
        db_session.commit()
        return category

    return _make


@pytest.fixture
def make_post(db_session):
    counter = {"n": 0}

    def _make(
        title: str,
        categories: Iterable[Category] = (),
        *,
        published: bool = True,
        created_at: Optional[datetime] = None,
        content: str = "<p>body</p>",
        cover_image_url: str = "https://img.example.com/cover.png",
    ) -> Post:
        counter["n"] += 1
        post = Post(
            title=title,
            content=content,
            cover_image_url=cover_image_url,
            published=published,
            created_at=created_at or BASE_TIME + timedelta(hours=counter["n"]),
            category_links=[PostCategory(category=c) for c in categories],
        )
        db_session.add(post)
        db_session.commit()
        return post

    return _make

import pytest

from blog_api.common.exceptions import NotFoundError
from blog_api.models.enums import PostVisibility
from blog_api.services.publication_service import publication_service


@pytest.fixture
def posts(make_category, make_post):
    tech = make_category("Tech")
    old = make_post("old", [tech])
    draft = make_post("draft", [tech], published=False)
    new = make_post("new", [tech])
    return {"old": old, "draft": draft, "new": new}


def test_list_public_only_published_newest_first(db_session, posts):
    listed = publication_service.list_public(db_session)
    assert [p.id for p in listed] == [posts["new"].id, posts["old"].id]


def test_list_admin_includes_drafts(db_session, posts):
    listed = publication_service.list_admin(db_session)
    assert [p.id for p in listed] == [posts["new"].id, posts["draft"].id, posts["old"].id]


def test_public_lookup_hides_drafts_like_missing(db_session, posts):
    with pytest.raises(NotFoundError) as draft_err:
        publication_service.get_public_by_id(db_session, posts["draft"].id)
    with pytest.raises(NotFoundError) as missing_err:
        publication_service.get_public_by_id(db_session, "does-not-exist")

    assert draft_err.value.detail == missing_err.value.detail


def test_public_lookup_returns_published(db_session, posts):
    assert publication_service.get_public_by_id(db_session, posts["new"].id).id == posts["new"].id


def test_admin_lookup_returns_drafts(db_session, posts):
    assert publication_service.get_admin_by_id(db_session, posts["draft"].id).published is False
    with pytest.raises(NotFoundError):
        publication_service.get_admin_by_id(db_session, "does-not-exist")


def test_publish_and_unpublish_are_idempotent(db_session, posts):
    draft_id = posts["draft"].id

    published = publication_service.publish(db_session, draft_id)
    assert published.visibility == PostVisibility.published
    assert publication_service.publish(db_session, draft_id).published is True
    assert publication_service.get_public_by_id(db_session, draft_id).id == draft_id

    assert publication_service.unpublish(db_session, draft_id).visibility == PostVisibility.draft
    assert publication_service.unpublish(db_session, draft_id).published is False
    with pytest.raises(NotFoundError):
        publication_service.get_public_by_id(db_session, draft_id)


def test_transition_on_missing_post(db_session):
    with pytest.raises(NotFoundError):
        publication_service.publish(db_session, "does-not-exist")

import pytest

from blog_backend.errors import Forbidden, NotFound, ValidationError
from blog_backend.models.document import Document
from blog_backend.models.post import Post
from blog_backend.security import Claims
from blog_backend.services import posts as post_service

ALICE = Claims(id="u-alice", email="a@x.com", username="alice")
BOB = Claims(id="u-bob", email="b@x.com", username="bob")


@pytest.fixture
def doc():
    return Document()


@pytest.fixture
def post(doc):
    return post_service.create_post(doc, ALICE, "Title", "Body")


def test_create_post_snapshots_author(doc, post):
    assert post.author_id == ALICE.id
    assert post.author_name == "alice"
    assert post.likes == [] and post.comments == []
    assert doc.posts == [post]


@pytest.mark.parametrize("title,content", [("", "C"), ("T", ""), (None, "C"), ("T", None)])
def test_create_post_requires_title_and_content(doc, title, content):
    with pytest.raises(ValidationError):
        post_service.create_post(doc, ALICE, title, content)
    assert doc.posts == []


def test_get_post(doc, post):
    assert post_service.get_post(doc, post.id) is post
    with pytest.raises(NotFound):
        post_service.get_post(doc, "missing")


def test_list_posts_newest_first(doc):
    for ts in (100, 300, 200):
        doc.posts.append(Post(title=str(ts), content="c", author_id="u", author_name="n", created_at=ts))
    assert [p.created_at for p in post_service.list_posts(doc)] == [300, 200, 100]


def test_list_posts_ties_keep_storage_order(doc):
    first = Post(title="a", content="c", author_id="u", author_name="n", created_at=5)
    second = Post(title="b", content="c", author_id="u", author_name="n", created_at=5)
    doc.posts.extend([first, second])
    assert post_service.list_posts(doc) == [first, second]


def test_update_post_applies_present_fields(doc, post):
    updated = post_service.update_post(doc, ALICE.id, post.id, title="New")
    assert updated.title == "New"
    assert updated.content == "Body"


def test_update_post_ignores_empty_strings(doc, post):
    post_service.update_post(doc, ALICE.id, post.id, title="", content="")
    assert (post.title, post.content) == ("Title", "Body")


def test_update_post_by_other_user_is_forbidden(doc, post):
    with pytest.raises(Forbidden):
        post_service.update_post(doc, BOB.id, post.id, title="Hijack")
    with pytest.raises(Forbidden):
        post_service.update_post(doc, BOB.id, post.id)
    assert post.title == "Title"


def test_update_missing_post(doc):
    with pytest.raises(NotFound):
        post_service.update_post(doc, ALICE.id, "missing", title="x")


def test_delete_post(doc, post):
    with pytest.raises(Forbidden):
        post_service.delete_post(doc, BOB.id, post.id)
    removed = post_service.delete_post(doc, ALICE.id, post.id)
    assert removed is post
    assert doc.posts == []
    with pytest.raises(NotFound):
        post_service.delete_post(doc, ALICE.id, post.id)


def test_toggle_like_twice_restores_state(doc, post):
    assert post_service.toggle_like(doc, BOB.id, post.id) == (1, True)
    assert post_service.toggle_like(doc, ALICE.id, post.id) == (2, True)
    assert post_service.toggle_like(doc, BOB.id, post.id) == (1, False)
    assert post.likes == [ALICE.id]


def test_toggle_like_missing_post(doc):
    with pytest.raises(NotFound):
        post_service.toggle_like(doc, BOB.id, "missing")


def test_add_comment_appends_in_order(doc, post):
    first = post_service.add_comment(doc, BOB.id, BOB.username, post.id, "one")
    second = post_service.add_comment(doc, ALICE.id, ALICE.username, post.id, "two")
    assert post.comments == [first, second]
    assert first.user_id == BOB.id and first.username == "bob"


def test_add_comment_validates_text_before_lookup(doc):
    with pytest.raises(ValidationError):
        post_service.add_comment(doc, BOB.id, BOB.username, "missing", "")
    with pytest.raises(NotFound):
        post_service.add_comment(doc, BOB.id, BOB.username, "missing", "hi")

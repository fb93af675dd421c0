import logging

from blog_backend.errors import Forbidden, NotFound, ValidationError
from blog_backend.models.document import Document
from blog_backend.models.post import Comment, Post
from blog_backend.security import Claims

logger = logging.getLogger("blog.posts")


def can_modify_post(user_id: str, post: Post) -> bool:
    return post.author_id == user_id


def _require_post(document: Document, post_id: str) -> Post:
    post = document.find_post(post_id)
    if not post:
        raise NotFound("Post not found")
    return post


def require_owned_post(document: Document, actor_id: str, post_id: str) -> Post:
    post = _require_post(document, post_id)
    if not can_modify_post(actor_id, post):
        logger.warning("POST_FORBIDDEN post=%s actor=%s", post_id, actor_id)
        raise Forbidden()
    return post


def list_posts(document: Document) -> list[Post]:
    """Newest first; ``sorted`` is stable so equal timestamps keep storage order."""
    return sorted(document.posts, key=lambda p: p.created_at, reverse=True)


def get_post(document: Document, post_id: str) -> Post:
    return _require_post(document, post_id)


def create_post(document: Document, author: Claims, title: str | None, content: str | None) -> Post:
    if not title or not content:
        raise ValidationError("title and content required")
    post = Post(title=title, content=content, author_id=author.id, author_name=author.username)
    document.posts.append(post)
    logger.info("POST_CREATE post=%s author=%s", post.id, author.id)
    return post


def update_post(
    document: Document,
    actor_id: str,
    post_id: str,
    *,
    title: str | None = None,
    content: str | None = None,
) -> Post:
    post = require_owned_post(document, actor_id, post_id)
    # empty strings leave the field untouched
    if title:
        post.title = title
    if content:
        post.content = content
    return post


def delete_post(document: Document, actor_id: str, post_id: str) -> Post:
    post = require_owned_post(document, actor_id, post_id)
    document.posts.remove(post)
    logger.info("POST_DELETE post=%s actor=%s", post_id, actor_id)
    return post


def toggle_like(document: Document, user_id: str, post_id: str) -> tuple[int, bool]:
    post = _require_post(document, post_id)
    if user_id in post.likes:
        post.likes = [u for u in post.likes if u != user_id]
        liked = False
    else:
        post.likes.append(user_id)
        liked = True
    return len(post.likes), liked


def add_comment(document: Document, user_id: str, username: str, post_id: str, text: str | None) -> Comment:
    if not text:
        raise ValidationError("text required")
    post = _require_post(document, post_id)
    comment = Comment(user_id=user_id, username=username, text=text)
    post.comments.append(comment)
    return comment

from pydantic import BaseModel

from blog_backend.schemas.base import RequestBody


class PostCreate(RequestBody):
    title: str | None = None
    content: str | None = None


class PostUpdate(RequestBody):
    title: str | None = None
    content: str | None = None


class CommentCreate(RequestBody):
    text: str | None = None


class LikeResponse(BaseModel):
    likes: int
    liked: bool

from pydantic import Field

from blog_backend.models.base import Record
from blog_backend.utils.ids import new_id, now_ms


class Comment(Record):
    id: str = Field(default_factory=new_id)
    user_id: str
    username: str
    text: str
    created_at: int = Field(default_factory=now_ms)


class Post(Record):
    id: str = Field(default_factory=new_id)
    title: str
    content: str
    author_id: str
    author_name: str
    created_at: int = Field(default_factory=now_ms)
    likes: list[str] = Field(default_factory=list)
    comments: list[Comment] = Field(default_factory=list)

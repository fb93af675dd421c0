from pydantic import Field

from blog_backend.models.base import Record
from blog_backend.utils.ids import new_id, now_ms


class User(Record):
    id: str = Field(default_factory=new_id)
    email: str
    username: str
    password_hash: str
    created_at: int = Field(default_factory=now_ms)

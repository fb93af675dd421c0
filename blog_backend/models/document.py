from pydantic import Field

from blog_backend.models.base import Record
from blog_backend.models.post import Post
from blog_backend.models.user import User


class Document(Record):
    users: list[User] = Field(default_factory=list)
    posts: list[Post] = Field(default_factory=list)

    def find_user(self, user_id: str) -> User | None:
        return next((u for u in self.users if u.id == user_id), None)

    def find_user_by_email(self, email: str) -> User | None:
        return next((u for u in self.users if u.email == email), None)

    def find_post(self, post_id: str) -> Post | None:
        return next((p for p in self.posts if p.id == post_id), None)

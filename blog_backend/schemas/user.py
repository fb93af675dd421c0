from pydantic import BaseModel

from blog_backend.models.base import Record
from blog_backend.models.post import Post
from blog_backend.schemas.base import RequestBody


class RegisterRequest(RequestBody):
    email: str | None = None
    password: str | None = None
    username: str | None = None


class LoginRequest(RequestBody):
    email: str | None = None
    password: str | None = None


class UserPublic(BaseModel):
    id: str
    email: str
    username: str


class AuthResponse(BaseModel):
    token: str
    user: UserPublic


class ProfileResponse(Record):
    id: str
    email: str
    username: str
    my_posts: list[Post]

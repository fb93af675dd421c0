import logging

from blog_backend.errors import AuthError, Conflict, NotFound, ValidationError
from blog_backend.models.document import Document
from blog_backend.models.post import Post
from blog_backend.models.user import User
from blog_backend.security import Authenticator, Claims

logger = logging.getLogger("blog.accounts")


def claims_for(user: User) -> Claims:
    return Claims(id=user.id, email=user.email, username=user.username)


async def prepare_registration(
    authenticator: Authenticator,
    email: str | None,
    password: str | None,
    username: str | None,
) -> str:
    """Validate the registration fields and return the password hash.

    Hashing happens here, outside any store transaction, so the document
    lock is never held while bcrypt runs.
    """
    if not email or not password or not username:
        raise ValidationError("email, password, username required")
    return await authenticator.hash_password_async(password)


def register(
    document: Document,
    authenticator: Authenticator,
    email: str,
    username: str,
    password_hash: str,
) -> tuple[User, str]:
    if document.find_user_by_email(email):
        raise Conflict("Email already registered")
    user = User(email=email, username=username, password_hash=password_hash)
    document.users.append(user)
    logger.info("USER_REGISTER user=%s", user.id)
    return user, authenticator.issue_token(claims_for(user))


async def login(document: Document, authenticator: Authenticator, email: str | None, password: str | None) -> tuple[User, str]:
    if not email or not password:
        raise ValidationError("email and password required")
    user = document.find_user_by_email(email)
    if not user or not await authenticator.verify_password_async(password, user.password_hash):
        logger.warning("AUTH_DENY reason=bad_credentials")
        raise AuthError("Invalid credentials")
    logger.info("USER_LOGIN user=%s", user.id)
    return user, authenticator.issue_token(claims_for(user))


def profile(document: Document, user_id: str) -> tuple[User, list[Post]]:
    user = document.find_user(user_id)
    if not user:
        raise NotFound("User not found")
    return user, [p for p in document.posts if p.author_id == user.id]

import asyncio
import logging
from datetime import datetime, timedelta, timezone

import bcrypt
from fastapi import Depends, Request
from jose import JWTError, jwt
from pydantic import BaseModel

from blog_backend.errors import AuthError

logger = logging.getLogger("blog.security")

# bcrypt only looks at the first 72 bytes of a password
_BCRYPT_MAX_BYTES = 72


class Claims(BaseModel):
    id: str
    email: str
    username: str


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


class Authenticator:
    def __init__(self, secret: str, *, algorithm: str = "HS256", expires_days: int = 7, rounds: int = 10):
        self.secret = secret
        self.algorithm = algorithm
        self.expires_in = timedelta(days=expires_days)
        self.rounds = rounds

    def hash_password(self, password: str) -> str:
        return bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt(rounds=self.rounds)).decode("utf-8")

    def verify_password(self, password: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(_password_bytes(password), hashed.encode("utf-8"))
        except ValueError:
            return False

    async def hash_password_async(self, password: str) -> str:
        return await asyncio.get_running_loop().run_in_executor(None, self.hash_password, password)

    async def verify_password_async(self, password: str, hashed: str) -> bool:
        return await asyncio.get_running_loop().run_in_executor(None, self.verify_password, password, hashed)

    def issue_token(self, claims: Claims) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "sub": claims.id,
            "id": claims.id,
            "email": claims.email,
            "username": claims.username,
            "iat": now,
            "exp": now + self.expires_in,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify_token(self, token: str) -> Claims:
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except JWTError as exc:
            raise AuthError("Invalid token") from exc
        try:
            return Claims(id=payload["id"], email=payload["email"], username=payload["username"])
        except (KeyError, TypeError, ValueError) as exc:
            raise AuthError("Invalid token") from exc


def audit_auth_failure(request: Request | None, reason: str) -> None:
    if not request:
        logger.warning("AUTH_DENY reason=%s", reason)
        return
    path = getattr(getattr(request, "url", None), "path", "-")
    method = getattr(request, "method", "-")
    client = getattr(request, "client", None)
    ip = getattr(client, "host", "-") if client else "-"
    logger.warning("AUTH_DENY reason=%s method=%s path=%s ip=%s", reason, method, path, ip)


def extract_bearer_token(request: Request) -> str | None:
    raw = (request.headers.get("authorization") or "").strip()
    if not raw:
        return None
    scheme, _, token = raw.partition(" ")
    if scheme.lower() != "bearer":
        return None
    return token.strip() or None


def get_authenticator(request: Request) -> Authenticator:
    return request.app.state.authenticator


def get_current_user(request: Request, authenticator: Authenticator = Depends(get_authenticator)) -> Claims:
    token = extract_bearer_token(request)
    if not token:
        audit_auth_failure(request, "missing_token")
        raise AuthError("Missing token")
    try:
        return authenticator.verify_token(token)
    except AuthError:
        audit_auth_failure(request, "invalid_token")
        raise

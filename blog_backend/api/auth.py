from fastapi import APIRouter, Depends

from blog_backend.schemas.user import AuthResponse, LoginRequest, ProfileResponse, RegisterRequest, UserPublic
from blog_backend.security import Authenticator, Claims, get_authenticator, get_current_user
from blog_backend.services import accounts
from blog_backend.store import DocumentStore, get_store

router = APIRouter()


def _public(user) -> UserPublic:
    return UserPublic(id=user.id, email=user.email, username=user.username)


@router.post("/register", response_model=AuthResponse, status_code=201)
async def register(
    payload: RegisterRequest | None = None,
    store: DocumentStore = Depends(get_store),
    authenticator: Authenticator = Depends(get_authenticator),
):
    payload = payload or RegisterRequest()
    password_hash = await accounts.prepare_registration(authenticator, payload.email, payload.password, payload.username)
    async with store.transaction() as doc:
        user, token = accounts.register(doc, authenticator, payload.email, payload.username, password_hash)
    return AuthResponse(token=token, user=_public(user))


@router.post("/login", response_model=AuthResponse)
async def login(
    payload: LoginRequest | None = None,
    store: DocumentStore = Depends(get_store),
    authenticator: Authenticator = Depends(get_authenticator),
):
    payload = payload or LoginRequest()
    doc = await store.read()
    user, token = await accounts.login(doc, authenticator, payload.email, payload.password)
    return AuthResponse(token=token, user=_public(user))


@router.get("/profile", response_model=ProfileResponse)
async def get_profile(current: Claims = Depends(get_current_user), store: DocumentStore = Depends(get_store)):
    doc = await store.read()
    user, my_posts = accounts.profile(doc, current.id)
    return ProfileResponse(id=user.id, email=user.email, username=user.username, my_posts=my_posts)

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError as SchemaError

from blog_backend.errors import ValidationError
from blog_backend.models.post import Comment, Post
from blog_backend.schemas.post import CommentCreate, LikeResponse, PostCreate, PostUpdate
from blog_backend.security import Claims, get_current_user
from blog_backend.services import posts as post_service
from blog_backend.store import DocumentStore, get_store

router = APIRouter()


def _parse_update(body: bytes) -> PostUpdate:
    if not body.strip():
        return PostUpdate()
    try:
        return PostUpdate.model_validate_json(body)
    except SchemaError as exc:
        raise ValidationError("Invalid request body") from exc


@router.get("", response_model=list[Post])
async def list_posts(store: DocumentStore = Depends(get_store)):
    doc = await store.read()
    return post_service.list_posts(doc)


@router.get("/{post_id}", response_model=Post)
async def get_post(post_id: str, store: DocumentStore = Depends(get_store)):
    doc = await store.read()
    return post_service.get_post(doc, post_id)


@router.post("", response_model=Post, status_code=201)
async def create_post(
    payload: PostCreate | None = None,
    current: Claims = Depends(get_current_user),
    store: DocumentStore = Depends(get_store),
):
    payload = payload or PostCreate()
    async with store.transaction() as doc:
        post = post_service.create_post(doc, current, payload.title, payload.content)
    return post


@router.put("/{post_id}", response_model=Post)
async def update_post(
    post_id: str,
    request: Request,
    current: Claims = Depends(get_current_user),
    store: DocumentStore = Depends(get_store),
):
    body = await request.body()
    async with store.transaction() as doc:
        # ownership is settled before the body is looked at
        post_service.require_owned_post(doc, current.id, post_id)
        changes = _parse_update(body)
        post = post_service.update_post(doc, current.id, post_id, title=changes.title, content=changes.content)
    return post


@router.delete("/{post_id}", response_model=Post)
async def delete_post(
    post_id: str,
    current: Claims = Depends(get_current_user),
    store: DocumentStore = Depends(get_store),
):
    async with store.transaction() as doc:
        post = post_service.delete_post(doc, current.id, post_id)
    return post


@router.post("/{post_id}/like", response_model=LikeResponse)
async def like_post(
    post_id: str,
    current: Claims = Depends(get_current_user),
    store: DocumentStore = Depends(get_store),
):
    async with store.transaction() as doc:
        likes, liked = post_service.toggle_like(doc, current.id, post_id)
    return LikeResponse(likes=likes, liked=liked)


@router.post("/{post_id}/comments", response_model=Comment, status_code=201)
async def add_comment(
    post_id: str,
    payload: CommentCreate | None = None,
    current: Claims = Depends(get_current_user),
    store: DocumentStore = Depends(get_store),
):
    payload = payload or CommentCreate()
    async with store.transaction() as doc:
        comment = post_service.add_comment(doc, current.id, current.username, post_id, payload.text)
    return comment

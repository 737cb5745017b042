from typing import Annotated, List
from fastapi import APIRouter, Depends
import logging

from models import (
    Post, PostPublic, CommentPublic, MessageResponse, TextBody, ValidationErrorResponse,
    new_comment,
)
from dependencies import SessionDep, CallerDep
from core.errors import InvalidObjectIdError, NotFoundError, ForbiddenError
from services import store
from services.validation import require_text

router = APIRouter()
logger = logging.getLogger(__name__)

TextDep = Annotated[TextBody, Depends(require_text)]

NOT_FOUND = {404: {"model": MessageResponse}}
NOT_OWNER = {401: {"model": MessageResponse}}
INVALID_TEXT = {400: {"model": ValidationErrorResponse}}


def load_post(post_id: str, session, invalid_msg: str = "Post not found") -> Post:
    """Fetch a post, answering 404 for both missing posts and malformed ids"""
    try:
        post = store.get_post(post_id, session)
    except InvalidObjectIdError:
        raise NotFoundError(invalid_msg)
    if post is None:
        raise NotFoundError("Post not found")
    return post


@router.post("", response_model=PostPublic, responses=INVALID_TEXT)
async def create_post(
    caller: CallerDep,
    body: TextDep,
    session: SessionDep,
):
    """Create a post, snapshotting the author's name and avatar"""
    user = store.require_user(caller.id, session)
    post = Post(
        text=body.text,
        name=user.name,
        avatar=user.avatar,
        user=caller.id,
    )
    post = store.save_post(post, session)
    logger.info(f"User {caller.id} created post {post.id}")
    return post


@router.get("", response_model=List[PostPublic])
async def get_posts(session: SessionDep, caller: CallerDep):
    """Get all posts, newest first"""
    return store.list_posts(session)


@router.get("/{post_id}", response_model=PostPublic, responses=NOT_FOUND)
async def get_post(post_id: str, session: SessionDep, caller: CallerDep):
    """Get a specific post by ID"""
    return load_post(post_id, session)


@router.delete("/{post_id}", response_model=MessageResponse, responses={**NOT_FOUND, **NOT_OWNER})
async def delete_post(post_id: str, session: SessionDep, caller: CallerDep):
    """Delete a post owned by the caller"""
    post = load_post(post_id, session)
    if str(post.user) != str(caller.id):
        raise ForbiddenError("Not your post")
    store.delete_post(post, session)
    return {"msg": "Post deleted"}


@router.put("/{post_id}/tlike", response_model=List[str], responses=NOT_FOUND)
async def toggle_like(post_id: str, session: SessionDep, caller: CallerDep):
    """Like the post, or take the like back if the caller already liked it"""
    post = load_post(post_id, session)
    if str(caller.id) not in [str(liker) for liker in post.likes]:
        post.likes = [caller.id] + list(post.likes)
    else:
        post.likes = [liker for liker in post.likes if str(liker) != str(caller.id)]
    post = store.save_post(post, session)
    return post.likes


@router.post(
    "/{post_id}",
    response_model=List[CommentPublic],
    responses={**NOT_FOUND, **INVALID_TEXT},
)
async def add_comment(
    post_id: str,
    caller: CallerDep,
    body: TextDep,
    session: SessionDep,
):
    """Comment on a post"""
    user = store.require_user(caller.id, session)
    post = load_post(post_id, session)
    comment = new_comment(body.text, user.name, user.avatar, caller.id)
    post.comments = [comment] + list(post.comments)
    post = store.save_post(post, session)
    logger.info(f"User {caller.id} commented {comment['id']} on post {post.id}")
    return post.comments


@router.delete(
    "/{post_id}/{comment_id}",
    response_model=MessageResponse,
    responses={**NOT_FOUND, **NOT_OWNER},
)
async def delete_comment(
    post_id: str,
    comment_id: str,
    session: SessionDep,
    caller: CallerDep,
):
    """Delete one of the caller's comments"""
    post = load_post(post_id, session, invalid_msg="Couldn't locate resource")

    matched = [c for c in post.comments if str(c.get("id")) == comment_id]
    # More than one match means the document is corrupt, refuse to pick one
    if len(matched) != 1:
        raise NotFoundError("Comment not found")
    if str(matched[0].get("user")) != str(caller.id):
        raise ForbiddenError("Not your comment")

    post.comments = [c for c in post.comments if str(c.get("id")) != comment_id]
    store.save_post(post, session)
    return {"msg": "Comment deleted"}

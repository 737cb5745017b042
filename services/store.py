"""Document access for posts and users.

Lookups by id raise ``InvalidObjectIdError`` when the id is not a well formed
object id, so callers can tell a malformed id apart from a missing document.
"""
import logging

from sqlmodel import Session, select

from core.errors import InvalidObjectIdError, UserNotFoundError
from models import Post, User, is_object_id

logger = logging.getLogger(__name__)


def _check_id(value: str) -> str:
    if not is_object_id(value):
        raise InvalidObjectIdError(value)
    return value


def get_user(user_id: str, session: Session) -> User | None:
    return session.get(User, _check_id(user_id))


def require_user(user_id: str, session: Session) -> User:
    user = get_user(user_id, session)
    if user is None:
        raise UserNotFoundError(user_id)
    return user


def get_post(post_id: str, session: Session) -> Post | None:
    return session.get(Post, _check_id(post_id))


def list_posts(session: Session) -> list[Post]:
    return list(session.exec(select(Post).order_by(Post.date.desc())).all())


def save_post(post: Post, session: Session) -> Post:
    session.add(post)
    session.commit()
    session.refresh(post)
    return post


def delete_post(post: Post, session: Session) -> None:
    post_id = post.id
    session.delete(post)
    session.commit()
    logger.info(f"Deleted post {post_id}")

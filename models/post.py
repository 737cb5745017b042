from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel
from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel

from .ids import new_object_id


class PostBase(SQLModel):
    text: str
    name: str
    avatar: str | None = None
    user: str = Field(foreign_key="user.id", index=True, max_length=24)


class Post(PostBase, table=True):
    """A post document; likes and comments are embedded rather than joined"""
    id: str = Field(default_factory=new_object_id, primary_key=True, max_length=24)
    date: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), index=True)

    # Liker ids, most recent first
    likes: list[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    # Comment documents, most recent first, see CommentPublic for the shape
    comments: list[dict[str, Any]] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False)
    )


class CommentPublic(BaseModel):
    id: str
    text: str
    name: str
    avatar: str | None = None
    user: str
    date: datetime


class PostPublic(PostBase):
    id: str
    date: datetime
    likes: list[str]
    comments: list[CommentPublic]


class TextBody(BaseModel):
    """Request body shared by post creation and commenting"""
    text: str | None = None


def new_comment(text: str, name: str, avatar: str | None, user: str) -> dict[str, Any]:
    return {
        "id": new_object_id(),
        "text": text,
        "name": name,
        "avatar": avatar,
        "user": user,
        "date": datetime.now(timezone.utc).isoformat(),
    }

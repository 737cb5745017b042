from datetime import datetime, timezone

from sqlmodel import Field, SQLModel

from .ids import new_object_id

DEFAULT_AVATAR = "default_avatar.png"


class UserBase(SQLModel):
    name: str
    email: str = Field(index=True)
    avatar: str | None = Field(default=DEFAULT_AVATAR)


class User(UserBase, table=True):
    id: str = Field(default_factory=new_object_id, primary_key=True, max_length=24)
    date: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


from .ids import new_object_id, is_object_id
from .user import User
from .post import Post, PostPublic, CommentPublic, TextBody, new_comment
from .response import MessageResponse, FieldError, ValidationErrorResponse
from .auth import TokenData, Caller

__all__ = [
    "new_object_id", "is_object_id",
    "User",
    "Post", "PostPublic", "CommentPublic", "TextBody", "new_comment",
    "MessageResponse", "FieldError", "ValidationErrorResponse",
    "TokenData", "Caller",
]

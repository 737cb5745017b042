"""Error taxonomy for the posts API.

API errors carry the HTTP status and message they are rendered with by the
handlers registered in ``dependencies.setup_error_handlers``. Store errors are
raised by ``services.store`` and either translated by the routers or left to
the global handler, which turns them into a 500.
"""
from typing import Any


class PostsAPIError(Exception):
    status_code: int = 500
    msg: str = "Server Error"

    def __init__(self, msg: str | None = None):
        if msg is not None:
            self.msg = msg
        super().__init__(self.msg)

    def to_content(self) -> dict[str, Any]:
        return {"msg": self.msg}


class ValidationError(PostsAPIError):
    status_code = 400
    msg = "Invalid request"

    def __init__(self, errors: list[dict[str, Any]]):
        self.errors = errors
        super().__init__()

    def to_content(self) -> dict[str, Any]:
        return {"errors": self.errors}


class UnauthorizedError(PostsAPIError):
    status_code = 401
    msg = "Token is not valid"


class NotFoundError(PostsAPIError):
    status_code = 404
    msg = "Post not found"


class ForbiddenError(PostsAPIError):
    # Ownership violations answer 401
    status_code = 401
    msg = "Not authorized"


class StoreError(Exception):
    pass


class InvalidObjectIdError(StoreError):
    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Cast to ObjectId failed for value {value!r}")


class UserNotFoundError(StoreError):
    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"User {user_id} not found")

from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Annotated
from uuid import uuid4
import logging
from time import time

from fastapi import Depends, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine
from jwt.exceptions import InvalidTokenError
import jwt

from core.config import get_settings
from core.errors import PostsAPIError, UnauthorizedError
from models import Caller, TokenData
from services.validation import errors_from_request_validation

settings = get_settings()
logger = logging.getLogger(__name__)


@lru_cache()
def get_engine():
    url = settings.DATABASE_URL
    kwargs = {"echo": settings.DB_ECHO}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        # In-memory databases only live as long as their single connection
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    return create_engine(url, **kwargs)


# Database dependency
def get_session():
    with Session(get_engine()) as session:
        yield session

SessionDep = Annotated[Session, Depends(get_session)]

# Authentication dependencies
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="token", auto_error=False)


def create_access_token(data: dict, expires_delta: timedelta | None = None):
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta if expires_delta else timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def get_request_token(request: Request, bearer: str | None) -> str | None:
    if bearer:
        return bearer
    token = request.headers.get(settings.AUTH_HEADER_NAME)
    if token:
        return token
    token = request.cookies.get(settings.AUTH_COOKIE_NAME)
    if token:
        return token.replace("Bearer ", "")
    return None


async def get_caller(
    request: Request,
    bearer: Annotated[str | None, Depends(oauth2_scheme)],
) -> Caller:
    """Resolve the caller id from the request token or reject the request"""
    token = get_request_token(request, bearer)
    if not token:
        raise UnauthorizedError("No token, authorization denied")
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        token_data = TokenData(sub=payload.get("sub"))
    except InvalidTokenError:
        raise UnauthorizedError("Token is not valid")
    if not token_data.sub:
        raise UnauthorizedError("Token is not valid")
    return Caller(id=str(token_data.sub))

CallerDep = Annotated[Caller, Depends(get_caller)]


# Middleware
async def log_requests(request: Request, call_next):
    start_time = time()
    response = await call_next(request)
    process_time = time() - start_time

    logger.info(
        f"Path: {request.url.path} | "
        f"Method: {request.method} | "
        f"Status: {response.status_code} | "
        f"Process Time: {process_time:.2f}s"
    )
    return response


# Error handlers
def setup_error_handlers(app):
    @app.exception_handler(PostsAPIError)
    async def posts_api_error_handler(request: Request, exc: PostsAPIError):
        return JSONResponse(
            status_code=exc.status_code,
            content=jsonable_encoder(exc.to_content()),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=jsonable_encoder({"errors": errors_from_request_validation(exc)}),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        error_id = str(uuid4())
        logger.error(
            f"Unhandled error {error_id}: {str(exc)}",
            exc_info=True,
            extra={
                "path": request.url.path,
                "method": request.method,
                "error_id": error_id,
            },
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"msg": "Server Error", "error_id": error_id},
        )

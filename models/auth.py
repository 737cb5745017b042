from pydantic import BaseModel


class TokenData(BaseModel):
    sub: str | None = None


class Caller(BaseModel):
    """Identity resolved from the request token"""
    id: str

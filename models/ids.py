import re
import secrets
from time import time

OBJECT_ID_PATTERN = re.compile(r"^[0-9a-f]{24}$")


def new_object_id() -> str:
    """Generate a 24 hex character id: creation second followed by 8 random bytes"""
    return f"{int(time()) & 0xFFFFFFFF:08x}{secrets.token_hex(8)}"


def is_object_id(value) -> bool:
    return isinstance(value, str) and OBJECT_ID_PATTERN.match(value) is not None

from .tokens import create_access_token, decode_access_token
from .middleware import extract_token, verify_token

__all__ = [
    "create_access_token",
    "decode_access_token",
    "extract_token",
    "verify_token",
]

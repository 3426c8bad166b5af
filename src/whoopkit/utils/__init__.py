from whoopkit.utils.crypto import generate_state_token
from whoopkit.utils.http import read_text
from whoopkit.utils.urls import build_query, join_url, with_query

__all__ = [
    "build_query",
    "generate_state_token",
    "join_url",
    "read_text",
    "with_query",
]

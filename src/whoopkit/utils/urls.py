from collections.abc import Mapping
from urllib.parse import parse_qsl, quote, urlencode, urlparse, urlunparse


def join_url(base_url: str, path: str) -> str:
    parsed = urlparse(base_url)
    base_path = parsed.path.rstrip("/")
    append_path = path.lstrip("/")
    joined_path = f"{base_path}/{append_path}" if append_path else base_path
    return urlunparse(parsed._replace(path=joined_path))


def build_query(params: Mapping[str, str] | list[tuple[str, str]]) -> str:
    # percent-encode everything, spaces included, so "a b" becomes "a%20b" rather than "a+b"
    return urlencode(params, quote_via=quote, safe="")


def with_query(url: str, params: Mapping[str, str]) -> str:
    """Add ``params`` to the query of ``url``.

    Parameters already on ``url`` are kept unless ``params`` sets the same key.
    """
    parsed = urlparse(url)
    query_params = [
        (key, value) for key, value in parse_qsl(parsed.query, keep_blank_values=True) if key not in params
    ]
    query_params.extend(params.items())
    return urlunparse(parsed._replace(query=build_query(query_params)))

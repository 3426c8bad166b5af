import httpx


async def read_text(response: httpx.Response) -> str | None:
    """Read a streamed response body as text, or ``None`` if it cannot be read."""
    try:
        await response.aread()
    except httpx.HTTPError:
        return None
    return response.text

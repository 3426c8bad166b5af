from collections.abc import AsyncIterator, Awaitable, Callable

from pydantic import BaseModel

from whoopkit.models.common import Collection, QueryFilter


async def paginate[RecordT: BaseModel](
    fetch: Callable[[QueryFilter | None], Awaitable[Collection[RecordT]]],
    query: QueryFilter | None = None,
) -> AsyncIterator[RecordT]:
    """Yield every record of a collection endpoint, following ``next_token``.

    Each page is a single ``fetch`` call; any error it raises ends the iteration.

    Example:
        >>> async for cycle in paginate(client.list_cycles, CycleQuery(limit=25)):
        ...     print(cycle.id)
    """
    current = query
    while True:
        page = await fetch(current)
        for record in page.records or []:
            yield record

        if not page.next_token:
            return
        current = (current or QueryFilter()).with_next_token(page.next_token)

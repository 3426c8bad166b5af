from enum import StrEnum
from typing import Generic, TypeVar

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field

RecordT = TypeVar("RecordT", bound=BaseModel)


class ScoreState(StrEnum):
    """Whether the backend has finished computing a score."""

    SCORED = "SCORED"
    PENDING_SCORE = "PENDING_SCORE"
    UNSCORABLE = "UNSCORABLE"


class WhoopModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class QueryFilter(BaseModel):
    """Query parameters accepted by collection endpoints.

    Unset fields are left out of the query string entirely. ``start`` and
    ``end`` must be timezone-aware.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    limit: int | None = Field(default=None, ge=1)
    start: AwareDatetime | None = None
    end: AwareDatetime | None = None
    next_token: str | None = Field(default=None, alias="nextToken")

    def to_params(self) -> dict[str, str]:
        dumped = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        return {key: str(value) for key, value in dumped.items()}

    def with_next_token(self, next_token: str) -> "QueryFilter":
        return self.model_copy(update={"next_token": next_token})


CycleQuery = QueryFilter
RecoveryQuery = QueryFilter
SleepQuery = QueryFilter
WorkoutQuery = QueryFilter


class Collection(WhoopModel, Generic[RecordT]):
    records: list[RecordT] | None = None
    next_token: str | None = None

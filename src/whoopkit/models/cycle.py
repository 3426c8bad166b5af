from datetime import datetime

from whoopkit.models.common import Collection, ScoreState, WhoopModel


class CycleScore(WhoopModel):
    strain: float
    kilojoule: float
    average_heart_rate: int
    max_heart_rate: int


class Cycle(WhoopModel):
    id: int
    user_id: int
    created_at: datetime
    updated_at: datetime
    start: datetime
    end: datetime | None = None
    timezone_offset: str
    score_state: ScoreState
    score: CycleScore | None = None


class CycleCollection(Collection[Cycle]):
    pass

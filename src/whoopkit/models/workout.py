from datetime import datetime
from uuid import UUID

from whoopkit.models.common import Collection, ScoreState, WhoopModel


class ZoneDurations(WhoopModel):
    zone_zero_milli: int
    zone_one_milli: int
    zone_two_milli: int
    zone_three_milli: int
    zone_four_milli: int
    zone_five_milli: int


class WorkoutScore(WhoopModel):
    strain: float
    average_heart_rate: int
    max_heart_rate: int
    kilojoule: float
    percent_recorded: float
    distance_meter: float | None = None
    altitude_gain_meter: float | None = None
    altitude_change_meter: float | None = None
    zone_durations: ZoneDurations


class Workout(WhoopModel):
    id: UUID
    v1_id: int | None = None
    user_id: int
    created_at: datetime
    updated_at: datetime
    start: datetime
    end: datetime
    timezone_offset: str
    sport_name: str
    score_state: ScoreState
    score: WorkoutScore | None = None
    sport_id: int | None = None


class WorkoutCollection(Collection[Workout]):
    pass

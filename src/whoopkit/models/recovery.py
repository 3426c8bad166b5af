from datetime import datetime
from uuid import UUID

from whoopkit.models.common import Collection, ScoreState, WhoopModel


class RecoveryScore(WhoopModel):
    user_calibrating: bool
    recovery_score: float
    resting_heart_rate: float
    hrv_rmssd_milli: float
    spo2_percentage: float | None = None
    skin_temp_celsius: float | None = None


class Recovery(WhoopModel):
    cycle_id: int
    sleep_id: UUID
    user_id: int
    created_at: datetime
    updated_at: datetime
    score_state: ScoreState
    score: RecoveryScore | None = None


class RecoveryCollection(Collection[Recovery]):
    pass

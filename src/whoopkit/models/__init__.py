"""Response and query shapes for the WHOOP v2 endpoints."""

from whoopkit.models.common import (
    Collection,
    CycleQuery,
    QueryFilter,
    RecoveryQuery,
    ScoreState,
    SleepQuery,
    WhoopModel,
    WorkoutQuery,
)
from whoopkit.models.cycle import Cycle, CycleCollection, CycleScore
from whoopkit.models.recovery import Recovery, RecoveryCollection, RecoveryScore
from whoopkit.models.sleep import Sleep, SleepCollection, SleepNeeded, SleepScore, SleepStageSummary
from whoopkit.models.user import UserBasicProfile, UserBodyMeasurement
from whoopkit.models.workout import Workout, WorkoutCollection, WorkoutScore, ZoneDurations

__all__ = [
    "Collection",
    "Cycle",
    "CycleCollection",
    "CycleQuery",
    "CycleScore",
    "QueryFilter",
    "Recovery",
    "RecoveryCollection",
    "RecoveryQuery",
    "RecoveryScore",
    "ScoreState",
    "Sleep",
    "SleepCollection",
    "SleepNeeded",
    "SleepQuery",
    "SleepScore",
    "SleepStageSummary",
    "UserBasicProfile",
    "UserBodyMeasurement",
    "WhoopModel",
    "Workout",
    "WorkoutCollection",
    "WorkoutQuery",
    "WorkoutScore",
    "ZoneDurations",
]

from collections.abc import Iterable
from enum import StrEnum
from typing import Self


class Scope(StrEnum):
    READ_RECOVERY = "read:recovery"
    READ_CYCLES = "read:cycles"
    READ_WORKOUT = "read:workout"
    READ_SLEEP = "read:sleep"
    READ_PROFILE = "read:profile"
    READ_BODY_MEASUREMENT = "read:body_measurement"
    OFFLINE = "offline"

    def encode(self) -> str:
        return self.value

    @classmethod
    def decode(cls, value: str) -> Self | None:
        try:
            return cls(value)
        except ValueError:
            return None


type ScopeSet = frozenset[Scope]

# offline is what makes the token endpoint hand back a refresh token
ALL_SCOPES: ScopeSet = frozenset(Scope)


def render_scopes(scopes: Iterable[Scope]) -> str:
    return " ".join(scope.encode() for scope in frozenset(scopes))


def parse_scopes(scopes_str: str | None) -> ScopeSet:
    if not scopes_str:
        return frozenset()

    return frozenset(scope for token in scopes_str.split() if (scope := Scope.decode(token)) is not None)


def validate_scopes(
    granted_scopes: Iterable[Scope] | None,
    required_scopes: Iterable[Scope],
) -> bool:
    # None is treated as "nothing granted"
    granted = frozenset(granted_scopes or ())
    return frozenset(required_scopes).issubset(granted)

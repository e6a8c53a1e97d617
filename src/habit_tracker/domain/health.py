"""Health provider domain models."""

from enum import StrEnum


class HealthAuthorizationState(StrEnum):
    """Authorization status reported by the health provider."""

    UNKNOWN = "unknown"
    UNAVAILABLE = "unavailable"
    NOT_DETERMINED = "not_determined"
    AUTHORIZED = "authorized"
    DENIED = "denied"

"""Health-data provider clients."""

import logging
import math
from dataclasses import dataclass
from datetime import date
from typing import Protocol

import httpx

from habit_tracker.domain.health import HealthAuthorizationState

_logger = logging.getLogger(__name__)


class HealthProvider(Protocol):
    """Interface for the external health-data platform."""

    async def query_authorization(self) -> HealthAuthorizationState:
        """Return the current authorization state without prompting."""

    async def request_authorization(self) -> HealthAuthorizationState:
        """Ask for read/write access and return the resulting state."""

    async def fetch_steps(self, day: date) -> int | None:
        """Return the step count for a calendar day, or None."""

    async def save_weight(self, pounds: float, day: date) -> bool:
        """Write a body-mass sample and return whether it was stored."""

    async def close(self) -> None:
        """Release any held resources."""


class UnavailableHealthProvider(HealthProvider):
    """Provider used when no health platform is present."""

    async def query_authorization(self) -> HealthAuthorizationState:
        return HealthAuthorizationState.UNAVAILABLE

    async def request_authorization(self) -> HealthAuthorizationState:
        return HealthAuthorizationState.UNAVAILABLE

    async def fetch_steps(self, day: date) -> int | None:
        return None

    async def save_weight(self, pounds: float, day: date) -> bool:
        return False

    async def close(self) -> None:
        return None


@dataclass
class HttpxHealthProvider(HealthProvider):
    """HTTPX-backed client for a health-data bridge service.

    Transport, HTTP and payload errors are logged and reported as the
    provider's "nothing available" result, never raised.
    """

    base_url: str
    http_client: httpx.AsyncClient
    token: str | None = None
    timeout: float = 10.0

    @classmethod
    def create(
        cls, base_url: str, token: str | None = None, timeout: float = 10.0
    ) -> "HttpxHealthProvider":
        """Create a provider client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            http_client=httpx.AsyncClient(),
            token=token,
            timeout=timeout,
        )

    async def query_authorization(self) -> HealthAuthorizationState:
        """Read the bridge's authorization status."""
        payload = await self._call("GET", "/authorization")
        if payload is None:
            return HealthAuthorizationState.UNAVAILABLE
        return _parse_state(payload)

    async def request_authorization(self) -> HealthAuthorizationState:
        """Ask the bridge to prompt for step read and weight write access."""
        payload = await self._call(
            "POST",
            "/authorization",
            json={"read": ["step_count", "body_mass"], "write": ["body_mass"]},
        )
        if payload is None:
            return HealthAuthorizationState.UNAVAILABLE
        return _parse_state(payload)

    async def fetch_steps(self, day: date) -> int | None:
        """Fetch the cumulative step count for a day."""
        payload = await self._call("GET", "/steps", params={"date": day.isoformat()})
        if payload is None:
            return None
        steps = payload.get("steps")
        if isinstance(steps, bool) or not isinstance(steps, int | float):
            return None
        if not math.isfinite(steps) or steps < 0:
            _logger.warning("Health provider GET /steps returned %r", steps)
            return None
        return int(steps)

    async def save_weight(self, pounds: float, day: date) -> bool:
        """Store a weight sample in pounds for a day."""
        payload = await self._call(
            "POST", "/weight", json={"pounds": pounds, "date": day.isoformat()}
        )
        if payload is None:
            return False
        return payload.get("saved") is True

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    async def _call(
        self, method: str, path: str, **kwargs: object
    ) -> dict[str, object] | None:
        headers = {"Authorization": f"Bearer {self.token}"} if self.token else {}
        try:
            response = await self.http_client.request(
                method,
                f"{self.base_url}{path}",
                headers=headers,
                timeout=self.timeout,
                **kwargs,
            )
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            _logger.warning("Health provider %s %s failed: %s", method, path, exc)
            return None
        if not isinstance(payload, dict):
            _logger.warning("Health provider %s %s returned %r", method, path, payload)
            return None
        return payload


def _parse_state(payload: dict[str, object]) -> HealthAuthorizationState:
    try:
        return HealthAuthorizationState(str(payload.get("status")))
    except ValueError:
        return HealthAuthorizationState.UNKNOWN

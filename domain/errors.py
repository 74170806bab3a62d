"""Error taxonomy shared by every layer.

Upstream failures are classified once, in the API client. Shape problems are
reported by the schema validator and raised by the repositories. Normalization
raises ``MalformedMatch`` or ``ConfigurationGap`` for a single match.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence


class StatsError(Exception):
    """Base class for every classified failure."""


class UnknownServer(StatsError):
    def __init__(self, server: str) -> None:
        super().__init__(f"Unknown server '{server}'")
        self.server = server


# ── Upstream ────────────────────────────────────────────────────────────


class UpstreamError(StatsError):
    """Outbound call failed; ``url`` names the resource that was requested."""

    def __init__(self, message: str, url: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class RateLimited(UpstreamError):
    """Upstream signalled backpressure. Callers should back off, not retry in-line."""

    def __init__(self, url: str, retry_after_s: Optional[float] = None) -> None:
        super().__init__("Too many requests to the Riot API, try again later", url, 429)
        self.retry_after_s = retry_after_s


class NotFound(UpstreamError):
    def __init__(self, url: str) -> None:
        super().__init__("Resource not found in the Riot API", url, 404)


class Transient(UpstreamError):
    """Any other transport or server failure; safe to retry with backoff."""

    def __init__(self, url: str, status_code: Optional[int] = None, reason: str = "") -> None:
        detail = f"status {status_code}" if status_code is not None else (reason or "transport error")
        super().__init__(f"Riot API request failed ({detail})", url, status_code)
        self.reason = reason


# ── Validation ──────────────────────────────────────────────────────────


@dataclass(frozen=True)
class ValidationIssue:
    """One contract violation: dotted field path plus a human-readable reason."""

    path: str
    reason: str

    def __str__(self) -> str:
        return f"{self.path or '<root>'}: {self.reason}"


class ValidationFailure(StatsError):
    def __init__(self, kind: str, issues: Sequence[ValidationIssue]) -> None:
        self.kind = kind
        self.issues = tuple(issues)
        super().__init__(f"{kind} payload violates its contract ({len(self.issues)} issue(s))")


# ── Normalization ───────────────────────────────────────────────────────


class MalformedMatch(StatsError):
    """A single match cannot be aligned or normalized."""

    def __init__(self, match_id: str, reason: str) -> None:
        super().__init__(f"Match {match_id} is malformed: {reason}")
        self.match_id = match_id
        self.reason = reason


class ConfigurationGap(StatsError):
    """A static catalog (augments, champions) has no entry for a referenced id."""

    def __init__(self, catalog: str, key: object) -> None:
        super().__init__(f"Missing entry {key!r} in the {catalog} catalog")
        self.catalog = catalog
        self.key = key


class RegistryInitError(StatsError):
    """The content version / champion table could not be built at startup."""

"""Lookaside cache in front of upstream calls."""
from typing import Any, Awaitable, Callable

from core.logging.logger import get_logger
from domain.enums import ResourceKind
from domain.interfaces import ICacheStore

logger = get_logger(__name__, service="cache")


class CacheFrontDoor:
    """
    Decides whether a cached payload is still fresh or must be refetched.

    Only raw upstream JSON goes through here, so whatever comes out of the
    cache is validated again by the caller. A store that fails on read counts
    as a miss; a store that fails on write is logged and the freshly computed
    value is still returned.
    """

    def __init__(self, store: ICacheStore):
        self.store = store

    @staticmethod
    def make_key(kind: ResourceKind, *parts: Any) -> str:
        """Composite key, e.g. ``match:europe:EUW1_7012345678``."""
        return ":".join([kind.value, *(str(p) for p in parts)])

    async def get_or_compute(
        self,
        key: str,
        ttl_s: float,
        compute: Callable[[], Awaitable[Any]],
    ) -> Any:
        try:
            hit = await self.store.get(key)
        except Exception as exc:
            logger.warning(lambda: f"cache-read-failed {key}: {exc}")
            hit = None

        if hit is not None and hit.age_s < ttl_s:
            logger.debug(lambda: f"cache-hit {key}", extra={"age_s": round(hit.age_s, 1)})
            return hit.value

        logger.debug(lambda: f"cache-{'stale' if hit else 'miss'} {key}")
        value = await compute()

        try:
            await self.store.set(key, value)
        except Exception as exc:
            logger.warning(lambda: f"cache-write-failed {key}: {exc}")

        return value

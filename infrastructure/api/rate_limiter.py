"""Client-side sliding-window limiter matching Riot's documented windows."""
import asyncio
import time
from collections import deque
from dataclasses import dataclass
from typing import Deque, Dict, Optional, Tuple

from core.logging.logger import get_logger

logger = get_logger(__name__, service="riot-api")


class RateLimiter:
    """
    Sliding-window rate limiter with two windows:
      - Short : N requests per 1 second
      - Long  : N requests per 120 seconds
    """

    def __init__(
        self,
        requests_per_1_sec: int = 18,
        requests_per_2_min: int = 90,
    ):
        self.requests_per_1_sec = requests_per_1_sec
        self.requests_per_2_min = requests_per_2_min

        self._times_1s:   Deque[float] = deque()
        self._times_2min: Deque[float] = deque()
        self._lock = asyncio.Lock()

    def _prune(self, now: float) -> None:
        while self._times_1s and now - self._times_1s[0] > 1.0:
            self._times_1s.popleft()
        while self._times_2min and now - self._times_2min[0] > 120.0:
            self._times_2min.popleft()

    async def acquire(self) -> None:
        async with self._lock:
            while True:
                now = time.monotonic()
                self._prune(now)

                ok_1s   = len(self._times_1s)   < self.requests_per_1_sec
                ok_2min = len(self._times_2min) < self.requests_per_2_min

                if ok_1s and ok_2min:
                    self._times_1s.append(now)
                    self._times_2min.append(now)
                    return

                wait = 0.05
                if not ok_1s and self._times_1s:
                    wait = max(wait, 1.0   - (now - self._times_1s[0])   + 0.01)
                if not ok_2min and self._times_2min:
                    wait = max(wait, 120.0 - (now - self._times_2min[0]) + 0.01)

                used_1s, cap_1s, used_2min, cap_2min = self.get_status()
                logger.debug(
                    lambda: f"rate-limit-wait {wait:.2f}s",
                    extra={"window_1s": f"{used_1s}/{cap_1s}", "window_2min": f"{used_2min}/{cap_2min}"},
                )
                await asyncio.sleep(wait)

    def get_status(self) -> Tuple[int, int, int, int]:
        now = time.monotonic()
        used_1s   = sum(1 for t in self._times_1s   if now - t <= 1.0)
        used_2min = sum(1 for t in self._times_2min if now - t <= 120.0)
        return used_1s, self.requests_per_1_sec, used_2min, self.requests_per_2_min


@dataclass(frozen=True)
class WindowConfig:
    requests_per_1_sec: int
    requests_per_2_min: int


class EndpointRateLimiter:
    """One limiter per (endpoint family, routing host).

    Riot counts method limits per platform (euw1, na1, ...) for summoner,
    league and mastery calls and per routing region (europe, americas, ...)
    for account and match calls, so the host is part of the key.
    """

    def __init__(self, default: Optional[WindowConfig] = None):
        self._default = default or WindowConfig(18, 90)
        self._configs: Dict[str, WindowConfig] = {}
        self._limiters: Dict[Tuple[str, str], RateLimiter] = {}

    def configure(self, endpoint: str, requests_per_1_sec: int, requests_per_2_min: int) -> None:
        self._configs[endpoint] = WindowConfig(requests_per_1_sec, requests_per_2_min)

    def limiter_for(self, endpoint: str, host: str) -> RateLimiter:
        key = (endpoint, host.lower())
        limiter = self._limiters.get(key)
        if limiter is None:
            cfg = self._configs.get(endpoint, self._default)
            limiter = RateLimiter(cfg.requests_per_1_sec, cfg.requests_per_2_min)
            self._limiters[key] = limiter
        return limiter

    async def acquire(self, endpoint: str, host: str) -> None:
        await self.limiter_for(endpoint, host).acquire()

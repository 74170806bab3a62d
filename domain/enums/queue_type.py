"""Queue enumerations: ranked ladders, match-history filters and game modes."""
from enum import Enum
from typing import Optional


class RankedQueue(Enum):
    """``queueType`` tags returned by the league endpoints.

    Provides:
    - slot: the reconciled rank slot the queue lands in (solo, flex, arena)
    """

    RANKED_SOLO_5x5 = "RANKED_SOLO_5x5"  # Solo/Duo Queue
    RANKED_FLEX_SR = "RANKED_FLEX_SR"    # Flex 5v5 Queue
    CHERRY = "CHERRY"                    # Arena

    @property
    def slot(self) -> str:
        return {
            "RANKED_SOLO_5x5": "solo",
            "RANKED_FLEX_SR": "flex",
            "CHERRY": "arena",
        }[self.value]

    @classmethod
    def slot_for(cls, queue_type: str) -> str:
        """Slot for any upstream queue tag; unknown non-solo tags share the flex slot."""
        try:
            return cls(queue_type).slot
        except ValueError:
            return cls.RANKED_FLEX_SR.slot


class MatchTypeFilter(Enum):
    """Filter accepted by the match-id listing endpoint."""

    RANKED = "ranked"
    NORMAL = "normal"
    ALL = "all"

    @property
    def query_value(self) -> Optional[str]:
        """Value for the ``type`` query parameter; None means no filter."""
        return None if self == MatchTypeFilter.ALL else self.value

    @classmethod
    def from_string(cls, value: Optional[str]) -> 'MatchTypeFilter':
        if not value:
            return cls.ALL
        return cls(value.strip().lower())

"""Game queue ids (``info.queueId``) and their display labels."""
from enum import Enum
from typing import Optional


class GameQueue(Enum):
    """Queues the presentation layer knows how to label."""

    CUSTOM = 0
    NORMAL_DRAFT = 400
    RANKED_SOLO = 420
    NORMAL_BLIND = 430
    RANKED_FLEX = 440
    ARAM = 450
    SWIFTPLAY = 480
    QUICKPLAY = 490
    CLASH = 700
    ARAM_CLASH = 720
    COOP_INTRO = 870
    COOP_BEGINNER = 880
    COOP_INTERMEDIATE = 890
    ARURF = 900
    ONE_FOR_ALL = 1020
    NEXUS_BLITZ = 1300
    ULTIMATE_SPELLBOOK = 1400
    ARENA = 1700
    URF = 1900

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def lookup(cls, queue_id: int) -> Optional['GameQueue']:
        try:
            return cls(queue_id)
        except ValueError:
            return None

    @classmethod
    def label_for(cls, queue_id: int, fallback: str) -> str:
        """Label for ``queue_id``; ``fallback`` (upstream ``gameMode``) when the id is unlisted."""
        queue = cls.lookup(queue_id)
        return queue.label if queue else fallback


_LABELS = {
    GameQueue.CUSTOM: "Custom",
    GameQueue.NORMAL_DRAFT: "Normal Draft",
    GameQueue.RANKED_SOLO: "Ranked Solo/Duo",
    GameQueue.NORMAL_BLIND: "Normal Blind",
    GameQueue.RANKED_FLEX: "Ranked Flex",
    GameQueue.ARAM: "ARAM",
    GameQueue.SWIFTPLAY: "Swiftplay",
    GameQueue.QUICKPLAY: "Quickplay",
    GameQueue.CLASH: "Clash",
    GameQueue.ARAM_CLASH: "ARAM Clash",
    GameQueue.COOP_INTRO: "Co-op vs AI",
    GameQueue.COOP_BEGINNER: "Co-op vs AI",
    GameQueue.COOP_INTERMEDIATE: "Co-op vs AI",
    GameQueue.ARURF: "ARURF",
    GameQueue.ONE_FOR_ALL: "One for All",
    GameQueue.NEXUS_BLITZ: "Nexus Blitz",
    GameQueue.ULTIMATE_SPELLBOOK: "Ultimate Spellbook",
    GameQueue.ARENA: "Arena",
    GameQueue.URF: "URF",
}

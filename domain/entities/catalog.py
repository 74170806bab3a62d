"""Static lookup tables loaded once at startup."""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from ..errors import ConfigurationGap


@dataclass(frozen=True)
class Augment:
    """One arena augment as shown next to a player's build."""

    augment_id: int
    name: str
    rarity: str
    icon_url: str

    def to_dict(self) -> dict:
        return {
            'id': self.augment_id,
            'name': self.name,
            'rarity': self.rarity,
            'icon': self.icon_url,
        }


class AugmentCatalog:
    """Read-only ``augment id -> Augment`` table.

    ``get`` reports a missing id as None; ``resolve`` turns it into a
    ``ConfigurationGap`` because a referenced id that is not in the table
    means the bundled data is stale.
    """

    name = "arena augment"

    def __init__(self, augments: Iterable[Augment]) -> None:
        self._by_id: Mapping[int, Augment] = MappingProxyType({a.augment_id: a for a in augments})

    def __len__(self) -> int:
        return len(self._by_id)

    def get(self, augment_id: int) -> Optional[Augment]:
        return self._by_id.get(augment_id)

    def resolve(self, augment_id: int) -> Augment:
        augment = self.get(augment_id)
        if augment is None:
            raise ConfigurationGap(self.name, augment_id)
        return augment

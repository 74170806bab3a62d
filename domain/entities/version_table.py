"""Content version and champion id table shared by the whole process."""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from ..errors import ConfigurationGap


@dataclass(frozen=True)
class VersionTable:
    """Built once at startup by the version registry; read-only afterwards.

    ``champions`` maps the numeric champion key to the Data Dragon champion id
    ("MonkeyKing" for Wukong), which is also the asset file name.
    """

    version: str
    champions: Mapping[int, str] = field(default_factory=lambda: MappingProxyType({}))
    ddragon_url: str = "https://ddragon.leagueoflegends.com"

    def __post_init__(self) -> None:
        if not isinstance(self.champions, MappingProxyType):
            object.__setattr__(self, 'champions', MappingProxyType(dict(self.champions)))

    def champion_name(self, champion_id: int) -> Optional[str]:
        return self.champions.get(champion_id)

    def require_champion(self, champion_id: int) -> str:
        name = self.champion_name(champion_id)
        if name is None:
            raise ConfigurationGap("champion", champion_id)
        return name

    def champion_image_url(self, champion_name: str) -> str:
        # The champion list and the image CDN disagree on one name.
        if champion_name == 'FiddleSticks':
            champion_name = 'Fiddlesticks'
        return f"{self.ddragon_url}/cdn/{self.version}/img/champion/{champion_name}.png"

    def profile_icon_url(self, icon_id: int) -> str:
        return f"{self.ddragon_url}/cdn/{self.version}/img/profileicon/{icon_id}.png"

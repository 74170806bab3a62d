"""Region enumeration for League of Legends servers."""
from enum import Enum

from ..errors import UnknownServer


class Region(Enum):
    """League of Legends platform servers.

    Provides:
    - platform_route: platform host for summoner/league/mastery endpoints (e.g., euw1)
    - regional_route: routing host for account and match endpoints (e.g., europe)
    """

    # Europe
    EUW1 = "euw1"  # Europe West
    EUN1 = "eun1"  # Europe Nordic & East
    TR1 = "tr1"    # Turkey
    RU = "ru"      # Russia
    ME1 = "me1"    # Middle East

    # Americas
    NA1 = "na1"    # North America
    BR1 = "br1"    # Brazil
    LA1 = "la1"    # Latin America North
    LA2 = "la2"    # Latin America South

    # Asia
    KR = "kr"      # Korea
    JP1 = "jp1"    # Japan

    # SEA & Oceania
    OC1 = "oc1"    # Oceania
    PH2 = "ph2"    # Philippines
    SG2 = "sg2"    # Singapore
    TH2 = "th2"    # Thailand
    TW2 = "tw2"    # Taiwan
    VN2 = "vn2"    # Vietnam

    @property
    def platform_route(self) -> str:
        """Get platform routing value for API calls."""
        return self.value

    @property
    def regional_route(self) -> str:
        """Get regional routing for account and match APIs."""
        return _REGIONAL_ROUTES[self.value]

    @classmethod
    def from_server(cls, server: str) -> 'Region':
        """Resolve a user-supplied server code (case-insensitive)."""
        try:
            return cls(server.strip().lower())
        except ValueError:
            raise UnknownServer(server) from None


_REGIONAL_ROUTES = {
    "na1": "americas",
    "br1": "americas",
    "la1": "americas",
    "la2": "americas",
    "euw1": "europe",
    "eun1": "europe",
    "tr1": "europe",
    "ru": "europe",
    "me1": "europe",
    "kr": "asia",
    "jp1": "asia",
    "oc1": "sea",
    "ph2": "sea",
    "sg2": "sea",
    "th2": "sea",
    "tw2": "sea",
    "vn2": "sea",
}

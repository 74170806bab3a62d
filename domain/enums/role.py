"""Role/Position enumeration."""
from enum import Enum


class Role(Enum):
    """Team positions as reported in ``teamPosition``."""

    TOP = "TOP"
    JUNGLE = "JUNGLE"
    MIDDLE = "MIDDLE"
    BOTTOM = "BOTTOM"
    UTILITY = "UTILITY"  # Support
    UNSELECTED = ""      # Arena, ARAM, remakes

    @property
    def icon_file(self) -> str:
        """Position icon file name in the clash position-selector asset set."""
        name = self.value.lower() if self.value else "unselected"
        return f"icon-position-{name}.png"

    def icon_url(self, community_dragon_url: str) -> str:
        return (
            f"{community_dragon_url}/plugins/rcp-fe-lol-clash/global/default/"
            f"assets/images/position-selector/positions/{self.icon_file}"
        )

    @classmethod
    def from_team_position(cls, position: str) -> 'Role':
        """Map ``teamPosition``; empty or unrecognised values ("Invalid") are UNSELECTED."""
        try:
            return cls(position.upper())
        except ValueError:
            return cls.UNSELECTED

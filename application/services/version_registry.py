"""Content version and champion table, built once before serving."""
from typing import TYPE_CHECKING, Dict, Optional

from core.logging.logger import get_logger
from domain.entities import VersionTable
from domain.enums import ResourceKind
from domain.errors import RegistryInitError, UpstreamError, ValidationFailure
from .schema_validator import SchemaValidator

if TYPE_CHECKING:
    from infrastructure.api.riot_client import RiotAPIClient

logger = get_logger(__name__, service="versions")


class VersionRegistry:
    """
    Fetches the latest Data Dragon version and its champion list.

    ``initialize`` must succeed before any request that needs champion names
    is served; the resulting ``VersionTable`` is handed to consumers and never
    changes for the rest of the process.
    """

    def __init__(self, api_client: "RiotAPIClient", validator: Optional[SchemaValidator] = None):
        self.api_client = api_client
        self.validator = validator or SchemaValidator()
        self._table: Optional[VersionTable] = None

    @property
    def table(self) -> VersionTable:
        if self._table is None:
            raise RegistryInitError("Version registry used before initialize()")
        return self._table

    async def initialize(self) -> VersionTable:
        if self._table is not None:
            return self._table

        try:
            versions = self.validator.require(
                ResourceKind.VERSIONS, await self.api_client.get_versions(), subject="versions"
            )
            if not versions:
                raise RegistryInitError("Data Dragon returned no versions")
            version = versions[0]

            catalog = self.validator.require(
                ResourceKind.CHAMPION_CATALOG,
                await self.api_client.get_champion_catalog(version),
                subject=version,
            )
        except (UpstreamError, ValidationFailure) as exc:
            logger.critical(lambda: f"version-registry-init-failed: {exc}")
            raise RegistryInitError(f"Could not load champion data: {exc}") from exc

        champions: Dict[int, str] = {}
        for champion in catalog.data.values():
            try:
                champions[int(champion.key)] = champion.id
            except ValueError:
                raise RegistryInitError(
                    f"Champion {champion.id} has a non-numeric key {champion.key!r}"
                ) from None

        self._table = VersionTable(
            version=version,
            champions=champions,
            ddragon_url=self.api_client.ddragon_url,
        )
        logger.success(lambda: f"version-registry ready version={version} champions={len(champions)}")
        return self._table

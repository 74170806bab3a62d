"""Loads the bundled arena augment table."""
import json
from pathlib import Path
from typing import List, Sequence

from pydantic import BaseModel, ConfigDict, ValidationError

from config import settings
from core.logging.logger import get_logger
from domain.entities import Augment, AugmentCatalog
from domain.errors import RegistryInitError
from domain.schemas import CherryAugment

logger = get_logger(__name__, service="catalog")

SNAPSHOT_SOURCE = "CommunityDragon cherry-augments.json snapshot"


class AugmentRecord(BaseModel):
    model_config = ConfigDict(strict=True, frozen=True)

    id: int
    name: str
    rarity: str
    icon: str


class AugmentFile(BaseModel):
    model_config = ConfigDict(strict=True, frozen=True)

    augments: List[AugmentRecord]


def augment_icon_url(community_dragon_url: str, icon: str) -> str:
    return f"{community_dragon_url}/game/assets/ux/cherry/augments/icons/{icon.lower()}"


def load_augment_catalog(
    path: Path = settings.AUGMENTS_PATH,
    community_dragon_url: str = settings.COMMUNITY_DRAGON_URL,
) -> AugmentCatalog:
    """Read and check the augment JSON; a missing or broken file stops startup."""
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        parsed = AugmentFile.model_validate(raw)
    except (OSError, ValueError, ValidationError) as exc:
        logger.critical(lambda: f"augment-catalog-unreadable {path}: {exc}")
        raise RegistryInitError(f"Augment catalog {path} could not be loaded: {exc}") from exc

    catalog = AugmentCatalog(
        Augment(
            augment_id=r.id,
            name=r.name,
            rarity=r.rarity,
            icon_url=augment_icon_url(community_dragon_url, r.icon),
        )
        for r in parsed.augments
    )
    logger.info(lambda: f"augment-catalog loaded entries={len(catalog)}")
    return catalog


def _rarity(tag: str) -> str:
    # "kPrismatic" -> "prismatic"
    if tag[:1] == "k" and tag[1:2].isupper():
        tag = tag[1:]
    return tag.lower()


def to_record(augment: CherryAugment) -> AugmentRecord:
    return AugmentRecord(
        id=augment.id,
        name=augment.nameTRA,
        rarity=_rarity(augment.rarity),
        icon=augment.augmentSmallIconPath.rsplit("/", 1)[-1].lower(),
    )


def write_augment_snapshot(augments: Sequence[CherryAugment], path: Path = settings.AUGMENTS_PATH) -> int:
    """Rewrite the bundled table from a CommunityDragon listing; returns the number of entries."""
    records = sorted((to_record(a) for a in augments), key=lambda r: r.id)
    document = {
        "source": SNAPSHOT_SOURCE,
        "augments": [r.model_dump() for r in records],
    }
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.write_text(json.dumps(document, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")
    tmp.replace(path)
    logger.success(lambda: f"augment-catalog written entries={len(records)} path={path}")
    return len(records)

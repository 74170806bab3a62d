"""Structural validation of upstream payloads against their declared contracts."""
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, Sequence, Tuple, TypeVar

from pydantic import TypeAdapter, ValidationError

from core.logging.logger import get_logger
from domain.enums import ResourceKind
from domain.errors import ValidationFailure, ValidationIssue
from domain.schemas import (
    CherryAugment,
    RiotAccount,
    RiotChampionCatalog,
    RiotMastery,
    RiotMatch,
    RiotRankEntry,
    RiotSummoner,
)

logger = get_logger(__name__, service="validator")

T = TypeVar("T")

_CONTRACTS: Dict[ResourceKind, Any] = {
    ResourceKind.ACCOUNT: RiotAccount,
    ResourceKind.SUMMONER: RiotSummoner,
    ResourceKind.MASTERY_LIST: List[RiotMastery],
    ResourceKind.RANK_LIST: List[RiotRankEntry],
    ResourceKind.MATCH_IDS: List[str],
    ResourceKind.MATCH: RiotMatch,
    ResourceKind.VERSIONS: List[str],
    ResourceKind.CHAMPION_CATALOG: RiotChampionCatalog,
    ResourceKind.AUGMENT_LIST: List[CherryAugment],
}


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    """Outcome of one validation: the typed value, or every issue found."""

    value: Optional[T] = None
    issues: Tuple[ValidationIssue, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return not self.issues


def _format_path(loc: Sequence[Any]) -> str:
    """``('info', 'participants', 3, 'kills')`` -> ``info.participants[3].kills``."""
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path


class SchemaValidator:
    """
    Checks an untyped payload against the contract declared for its resource kind.

    Validation is strict (no coercion) and collects every violation in one
    pass. A bad payload is a normal result, never an exception; ``require``
    is the raising variant the repositories use.
    """

    def __init__(self) -> None:
        self._adapters: Dict[ResourceKind, TypeAdapter] = {
            kind: TypeAdapter(contract) for kind, contract in _CONTRACTS.items()
        }

    def validate(self, kind: ResourceKind, payload: Any) -> ValidationResult:
        adapter = self._adapters[kind]
        try:
            value = adapter.validate_python(payload, strict=True)
        except ValidationError as exc:
            issues = tuple(
                ValidationIssue(path=_format_path(err["loc"]), reason=err["msg"])
                for err in exc.errors(include_url=False)
            )
            return ValidationResult(issues=issues)
        return ValidationResult(value=value)

    def require(self, kind: ResourceKind, payload: Any, *, subject: str = "") -> Any:
        """Validated value, or ``ValidationFailure`` after logging each issue."""
        result = self.validate(kind, payload)
        if result.ok:
            return result.value

        for issue in result.issues:
            logger.error(
                lambda: f"contract-violation {kind.value} {issue}",
                extra={"resource": kind.value, "subject": subject, "path": issue.path},
            )
        raise ValidationFailure(kind.value, result.issues)

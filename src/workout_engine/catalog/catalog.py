"""MovementCatalog: immutable, id-ordered snapshot of available movements."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from pathlib import Path

import pandas as pd

from workout_engine.exceptions import CatalogError
from workout_engine.models.enums import MovementCategory
from workout_engine.models.movement import Movement

logger = logging.getLogger(__name__)

_CSV_COLUMNS = ("id", "name", "patterns", "required_equipment", "category")

_FREE_WEIGHTS = frozenset(
    {"barbell", "dumbbell", "kettlebell", "medicine-ball", "sandbag"}
)

# Named constraint -> predicate returning True when a movement must be excluded
CONSTRAINT_RULES: dict[str, Callable[[Movement], bool]] = {
    "no_weights": lambda m: not m.required_equipment.isdisjoint(_FREE_WEIGHTS),
    "no_barbell": lambda m: "barbell" in m.required_equipment,
    "low_impact": lambda m: "impact" in m.patterns,
    "no_running": lambda m: "running" in m.patterns,
    "upper_only": lambda m: "lower" in m.patterns and "upper" not in m.patterns,
    "lower_only": lambda m: "upper" in m.patterns and "lower" not in m.patterns,
}


def _matches_token(movement: Movement, token: str) -> bool:
    """Whole-word match of a free-form constraint against a movement."""
    slug = token.replace("_", "-").replace(" ", "-")
    words = " ".join(token.replace("-", " ").split())
    name = " ".join(movement.name.lower().replace("-", " ").split())
    return (
        f"-{slug}-" in f"-{movement.id}-"
        or f" {words} " in f" {name} "
        or slug in movement.patterns
    )


def is_excluded(movement: Movement, constraints: Iterable[str]) -> bool:
    """Whether any constraint excludes this movement.

    Named constraints use ``CONSTRAINT_RULES``; anything else is treated
    as a movement id, name word, or pattern to avoid.
    """
    for constraint in constraints:
        rule = CONSTRAINT_RULES.get(constraint)
        if rule is not None:
            if rule(movement):
                return True
        elif _matches_token(movement, constraint):
            return True
    return False


class MovementCatalog:
    """Read-only collection of movements, always iterated in id order.

    Usage::

        catalog = MovementCatalog.default()
        pool = catalog.pool_for(request.equipment, request.constraints)
    """

    def __init__(self, movements: Iterable[Movement]) -> None:
        ordered = tuple(sorted(movements, key=lambda m: m.id))
        by_id: dict[str, Movement] = {}
        for movement in ordered:
            if movement.id in by_id:
                raise CatalogError(f"Duplicate movement id: {movement.id}")
            by_id[movement.id] = movement
        self._movements = ordered
        self._by_id = by_id

    @classmethod
    def default(cls) -> MovementCatalog:
        from workout_engine.catalog.movements import DEFAULT_MOVEMENTS

        return cls(DEFAULT_MOVEMENTS)

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, str]]) -> MovementCatalog:
        """Build a catalog from flat records with ``;``-separated sets."""
        movements = []
        for row_number, record in enumerate(records, start=1):
            missing = [c for c in ("id", "name", "patterns") if not str(record.get(c, "")).strip()]
            if missing:
                raise CatalogError(f"Row {row_number}: missing {', '.join(missing)}")
            category = str(record.get("category") or MovementCategory.STRENGTH.value).strip().lower()
            try:
                resolved_category = MovementCategory(category)
            except ValueError as exc:
                raise CatalogError(f"Row {row_number}: unknown category {category!r}") from exc
            movements.append(
                Movement(
                    id=str(record["id"]).strip(),
                    name=str(record["name"]).strip(),
                    patterns=_split_set(record["patterns"]),
                    required_equipment=_split_set(record.get("required_equipment", "")),
                    category=resolved_category,
                )
            )
        return cls(movements)

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame) -> MovementCatalog:
        missing = [c for c in ("id", "name", "patterns") if c not in df.columns]
        if missing:
            raise CatalogError(f"Catalog is missing column(s): {', '.join(missing)}")
        return cls.from_records(df.to_dict(orient="records"))

    # -- access --------------------------------------------------------------

    @property
    def movements(self) -> tuple[Movement, ...]:
        return self._movements

    def __len__(self) -> int:
        return len(self._movements)

    def __iter__(self) -> Iterator[Movement]:
        return iter(self._movements)

    def __contains__(self, movement_id: object) -> bool:
        return movement_id in self._by_id

    def get(self, movement_id: str) -> Movement | None:
        return self._by_id.get(movement_id)

    def require(self, movement_id: str) -> Movement:
        movement = self._by_id.get(movement_id)
        if movement is None:
            raise CatalogError(f"Unknown movement id: {movement_id}")
        return movement

    # -- filtering -----------------------------------------------------------

    def available_for(self, equipment: frozenset[str]) -> tuple[Movement, ...]:
        return tuple(m for m in self._movements if m.is_available_with(equipment))

    def excluding(self, constraints: Iterable[str]) -> tuple[Movement, ...]:
        constraints = tuple(constraints)
        return tuple(m for m in self._movements if not is_excluded(m, constraints))

    def with_patterns(self, patterns: Iterable[str]) -> tuple[Movement, ...]:
        patterns = frozenset(patterns)
        return tuple(m for m in self._movements if m.has_any_pattern(patterns))

    def pool_for(
        self, equipment: frozenset[str], constraints: Iterable[str] = ()
    ) -> tuple[Movement, ...]:
        """Movements usable with ``equipment`` and not excluded by ``constraints``."""
        constraints = tuple(constraints)
        return tuple(
            m
            for m in self._movements
            if m.is_available_with(equipment) and not is_excluded(m, constraints)
        )


def _split_set(value: object) -> frozenset[str]:
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return frozenset()
    return frozenset(part.strip().lower() for part in str(value).split(";") if part.strip())


def load_catalog(path: str | Path) -> MovementCatalog:
    """Load a catalog snapshot from CSV.

    Columns: ``id,name,patterns,required_equipment,category``; the set
    columns are ``;``-separated.

    Raises:
        CatalogError: If the file is missing or malformed.
    """
    path = Path(path)
    if not path.exists():
        raise CatalogError(f"Catalog file not found: {path}")
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    catalog = MovementCatalog.from_dataframe(df)
    logger.info("Loaded %d movements from %s", len(catalog), path)
    return catalog


def catalog_to_dataframe(catalog: MovementCatalog) -> pd.DataFrame:
    """Flatten a catalog into the CSV column layout used by ``load_catalog``."""
    return pd.DataFrame(
        [
            {
                "id": m.id,
                "name": m.name,
                "patterns": ";".join(sorted(m.patterns)),
                "required_equipment": ";".join(sorted(m.required_equipment)),
                "category": m.category.value,
            }
            for m in catalog
        ],
        columns=list(_CSV_COLUMNS),
    )

"""Movement catalog: the snapshot movements are drawn from."""

from workout_engine.catalog.catalog import (
    CONSTRAINT_RULES,
    MovementCatalog,
    catalog_to_dataframe,
    is_excluded,
    load_catalog,
)
from workout_engine.catalog.movements import DEFAULT_MOVEMENTS

__all__ = [
    "CONSTRAINT_RULES",
    "DEFAULT_MOVEMENTS",
    "MovementCatalog",
    "catalog_to_dataframe",
    "is_excluded",
    "load_catalog",
]

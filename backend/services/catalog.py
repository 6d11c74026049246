"""Career-path catalog: loaded once from ``data/careers.json`` and never mutated."""

import json
import logging
from functools import lru_cache
from pathlib import Path

from models.schemas.career_path import CareerPathDefinition

logger = logging.getLogger(__name__)

CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "careers.json"


@lru_cache(maxsize=1)
def load_catalog(path: Path = CATALOG_PATH) -> tuple[CareerPathDefinition, ...]:
    """Read and validate the catalog. Cached for the process lifetime."""
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    catalog = tuple(CareerPathDefinition.model_validate(item) for item in raw)

    ids = [c.id for c in catalog]
    if len(set(ids)) != len(ids):
        raise ValueError(f"Duplicate career ids in catalog {path}")

    logger.info("Loaded %d career paths from %s", len(catalog), path)
    return catalog


def _resolve(catalog: tuple[CareerPathDefinition, ...] | None) -> tuple[CareerPathDefinition, ...]:
    return load_catalog() if catalog is None else catalog


def catalog_ids(catalog: tuple[CareerPathDefinition, ...] | None = None) -> list[str]:
    return [c.id for c in _resolve(catalog)]


def catalog_titles(catalog: tuple[CareerPathDefinition, ...] | None = None) -> list[str]:
    return [c.title for c in _resolve(catalog)]


def get_career(career_id: str) -> CareerPathDefinition | None:
    for career in load_catalog():
        if career.id == career_id:
            return career
    return None


def career_id_for_title(
    title: str,
    catalog: tuple[CareerPathDefinition, ...] | None = None,
) -> str | None:
    """Map a display title (e.g. "Data Scientist") to its id, or None."""
    for career in _resolve(catalog):
        if career.title == title:
            return career.id
    return None


def restrict_to_titles(
    titles: list[str],
    catalog: tuple[CareerPathDefinition, ...] | None = None,
) -> tuple[CareerPathDefinition, ...]:
    """Subset of the catalog whose titles appear in ``titles``, in catalog order."""
    wanted = set(titles)
    return tuple(c for c in _resolve(catalog) if c.title in wanted)

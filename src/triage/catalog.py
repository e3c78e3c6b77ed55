import json
import logging
from collections.abc import Iterable, Iterator, Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType

from pydantic import BaseModel, Field, ValidationError

from src.triage.models import Guide

LOGGER = logging.getLogger(__name__)
DEFAULT_CATALOG_PATH = Path(__file__).with_name("default_guides.json")


class CatalogError(ValueError):
    pass


class CatalogDocument(BaseModel):
    guides: list[Guide]
    hybrid_relations: dict[str, list[str]] = Field(default_factory=dict)


class GuideCatalog:
    """Immutable snapshot of guides in declaration order plus the hybrid relation map."""

    __slots__ = ("_guides", "_by_id", "_relations", "_categories")

    def __init__(
        self,
        guides: Iterable[Guide],
        relations: Mapping[str, Iterable[str]] | None = None,
    ) -> None:
        ordered = tuple(guides)
        by_id: dict[str, Guide] = {}
        for guide in ordered:
            if guide.id in by_id:
                raise CatalogError(f"duplicate guide id: {guide.id}")
            by_id[guide.id] = guide

        self._guides = ordered
        self._by_id = MappingProxyType(by_id)
        self._relations = MappingProxyType(
            {guide_id: tuple(related) for guide_id, related in (relations or {}).items()}
        )
        self._categories = tuple(sorted({guide.category for guide in ordered}))

    @property
    def guides(self) -> tuple[Guide, ...]:
        return self._guides

    @property
    def relations(self) -> Mapping[str, tuple[str, ...]]:
        return self._relations

    def __len__(self) -> int:
        return len(self._guides)

    def __iter__(self) -> Iterator[Guide]:
        return iter(self._guides)

    def __contains__(self, guide_id: object) -> bool:
        return guide_id in self._by_id

    def get_guide(self, guide_id: str) -> Guide | None:
        return self._by_id.get(guide_id)

    def list_categories(self) -> list[str]:
        return list(self._categories)

    def related_ids(self, guide_id: str) -> tuple[str, ...]:
        return self._relations.get(guide_id, ())

    def dangling_relations(self) -> list[tuple[str, str]]:
        missing: list[tuple[str, str]] = []
        for guide_id, related in self._relations.items():
            for related_id in related:
                if related_id not in self._by_id:
                    missing.append((guide_id, related_id))
        return missing


def load_catalog(catalog_path: Path | str | None = None) -> GuideCatalog:
    path = Path(catalog_path) if catalog_path else DEFAULT_CATALOG_PATH
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
        document = CatalogDocument.model_validate(raw)
    except (OSError, json.JSONDecodeError, ValidationError) as exc:
        raise CatalogError(f"failed to load guide catalog from {path}: {exc}") from exc

    catalog = GuideCatalog(document.guides, document.hybrid_relations)
    for guide_id, related_id in catalog.dangling_relations():
        LOGGER.warning("Hybrid relation points at an unknown guide. guide_id=%s related_id=%s", guide_id, related_id)
    LOGGER.info("Loaded guide catalog. path=%s guides=%d categories=%d", path, len(catalog), len(catalog.list_categories()))
    return catalog


@lru_cache(maxsize=1)
def default_catalog() -> GuideCatalog:
    return load_catalog()


def get_guide(guide_id: str) -> Guide | None:
    return default_catalog().get_guide(guide_id)


def list_categories() -> list[str]:
    return default_catalog().list_categories()

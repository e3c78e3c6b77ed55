import logging
from threading import Lock

from src.triage.catalog import GuideCatalog, load_catalog
from src.triage.hybrid import build_hybrid_steps, collect_copy_payloads, resolve_media, resolve_steps
from src.triage.models import Guide, GuideSummary, coerce_platform
from src.triage.ranker import triage


class GuideNotFoundError(LookupError):
    pass


class TriageService:
    """Serves triage calls against the current catalog snapshot.

    The snapshot is a single immutable reference; reload() builds a complete
    replacement before swapping it in, so concurrent callers observe either
    the old or the new catalog.
    """

    def __init__(
        self,
        catalog: GuideCatalog | None = None,
        *,
        catalog_path: str | None = None,
        max_results: int = 20,
        default_device: str | None = "windows",
    ) -> None:
        self.catalog_path = catalog_path
        self.max_results = max_results
        self.default_device = coerce_platform(default_device)
        self.logger = logging.getLogger(__name__)
        self._catalog = catalog if catalog is not None else load_catalog(catalog_path)
        self._swap_lock = Lock()

    @property
    def catalog(self) -> GuideCatalog:
        return self._catalog

    def reload(self) -> GuideCatalog:
        # A failed load raises before the swap and the previous snapshot stays live.
        fresh = load_catalog(self.catalog_path)
        with self._swap_lock:
            self._catalog = fresh
        self.logger.info("Guide catalog swapped. guides=%d", len(fresh))
        return fresh

    def triage(self, query: str, device: str | None = None, category: str | None = None) -> list[GuideSummary]:
        return triage(query, device, catalog=self._catalog, category=category, limit=self.max_results)

    def list_guides(self) -> list[Guide]:
        return list(self._catalog.guides)

    def list_categories(self) -> list[str]:
        return self._catalog.list_categories()

    def get_guide(self, guide_id: str) -> Guide | None:
        return self._catalog.get_guide(guide_id)

    def require_guide(self, guide_id: str, snapshot: GuideCatalog | None = None) -> Guide:
        guide = (snapshot if snapshot is not None else self._catalog).get_guide(guide_id)
        if guide is None:
            self.logger.info("Guide lookup missed. guide_id=%s", guide_id)
            raise GuideNotFoundError(guide_id)
        return guide

    def resolve_device(self, device: str | None) -> str | None:
        platform = coerce_platform(device) or self.default_device
        return platform.value if platform is not None else None

    def guide_steps(self, guide_id: str, device: str | None, hybrid: bool) -> dict:
        snapshot = self._catalog
        guide = self.require_guide(guide_id, snapshot)

        resolved_device = self.resolve_device(device)
        steps = resolve_steps(guide, resolved_device)
        if hybrid:
            steps = build_hybrid_steps(guide.id, resolved_device, steps, catalog=snapshot)
        return {
            "guide_id": guide.id,
            "device": resolved_device,
            "hybrid": hybrid,
            "steps": steps,
            "commands": collect_copy_payloads(steps),
            "media": resolve_media(guide, resolved_device),
        }

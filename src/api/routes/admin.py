import logging

from fastapi import APIRouter, Depends, HTTPException

from src.api.app_runtime import ApiRuntime
from src.api.models import CatalogReloadResult
from src.api.routes.deps import get_runtime
from src.triage.catalog import CatalogError

router = APIRouter()
LOGGER = logging.getLogger(__name__)


@router.post("/admin/catalog/reload", response_model=CatalogReloadResult)
def reload_catalog(runtime: ApiRuntime = Depends(get_runtime)) -> CatalogReloadResult:
    if not runtime.config.catalog_reload_enabled:
        raise HTTPException(status_code=403, detail="Catalog reload is disabled.")
    try:
        catalog = runtime.service.reload()
    except CatalogError as exc:
        LOGGER.warning("Catalog reload rejected, keeping previous snapshot: %s", exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return CatalogReloadResult(
        status="reloaded",
        guide_count=len(catalog),
        category_count=len(catalog.list_categories()),
    )

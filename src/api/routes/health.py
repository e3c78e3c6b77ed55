from typing import Any

from fastapi import APIRouter, Depends

from src.api.app_runtime import ApiRuntime
from src.api.routes.deps import get_runtime

router = APIRouter()


@router.get("/health")
def health(runtime: ApiRuntime = Depends(get_runtime)) -> dict[str, Any]:
    config = runtime.config
    catalog = runtime.service.catalog
    return {
        "status": "ok",
        "guide_count": len(catalog),
        "category_count": len(catalog.list_categories()),
        "mcp_transport": config.mcp_transport,
        "catalog_reload_enabled": config.catalog_reload_enabled,
    }

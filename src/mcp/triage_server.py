import logging

from src.api.config import ApiConfig
from src.triage.catalog import GuideCatalog, load_catalog
from src.triage.hybrid import build_hybrid_steps, collect_copy_payloads, resolve_steps
from src.triage.models import coerce_platform
from src.triage.ranker import triage

try:
    from fastmcp import FastMCP
except ImportError as exc:  # pragma: no cover
    raise RuntimeError("fastmcp is required to run the MCP triage server.") from exc

CONFIG = ApiConfig.from_env()
mcp = FastMCP("GuideTriage")
CATALOG = load_catalog(CONFIG.catalog_path)
LOGGER = logging.getLogger(__name__)


def build_triage_payload(
    query: str,
    device: str | None = None,
    category: str | None = None,
    catalog: GuideCatalog = CATALOG,
) -> dict:
    results = triage(query, device, catalog=catalog, category=category, limit=CONFIG.triage_max_results)
    return {
        "query": query,
        "matches": [summary.model_dump(mode="json") for summary in results],
    }


def build_steps_payload(
    guide_id: str,
    device: str = "windows",
    hybrid: bool = True,
    catalog: GuideCatalog = CATALOG,
) -> dict:
    guide = catalog.get_guide(guide_id)
    if guide is None:
        LOGGER.info("MCP guide lookup missed. guide_id=%s", guide_id)
        return {"guide_id": guide_id, "error": "not_found"}

    platform = coerce_platform(device)
    steps = resolve_steps(guide, platform)
    if hybrid:
        steps = build_hybrid_steps(guide.id, platform, steps, catalog=catalog)
    return {
        "guide_id": guide.id,
        "device": platform.value if platform is not None else None,
        "steps": [step.model_dump(mode="json", by_alias=True, exclude_none=True) for step in steps],
        "commands": collect_copy_payloads(steps),
    }


@mcp.tool
def triage_guides(query: str, device: str | None = None, category: str | None = None) -> dict:
    return build_triage_payload(query=query, device=device, category=category)


@mcp.tool
def guide_steps(guide_id: str, device: str = "windows", hybrid: bool = True) -> dict:
    return build_steps_payload(guide_id=guide_id, device=device, hybrid=hybrid)


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )


if __name__ == "__main__":
    _setup_logging(CONFIG.log_level)
    if CONFIG.mcp_transport == "streamable_http":
        mcp.run(
            transport="streamable-http",
            host=CONFIG.mcp_host,
            port=CONFIG.mcp_port,
            path=CONFIG.mcp_path,
            show_banner=False,
        )
    else:
        mcp.run(transport="stdio", show_banner=False)

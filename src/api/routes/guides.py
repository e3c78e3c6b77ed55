from fastapi import APIRouter, Depends, HTTPException

from src.api.app_runtime import ApiRuntime
from src.api.models import (
    CategoryListResponse,
    GuideListResponse,
    GuideStepsResponse,
    TriageRequest,
    TriageResponse,
)
from src.api.routes.deps import get_runtime
from src.api.services.triage_service import GuideNotFoundError
from src.triage.models import Guide

router = APIRouter(prefix="/guides")


@router.get("", response_model=GuideListResponse)
def list_guides(runtime: ApiRuntime = Depends(get_runtime)) -> GuideListResponse:
    return GuideListResponse(guides=runtime.service.list_guides())


@router.get("/categories", response_model=CategoryListResponse)
def list_categories(runtime: ApiRuntime = Depends(get_runtime)) -> CategoryListResponse:
    return CategoryListResponse(categories=runtime.service.list_categories())


@router.post("/triage", response_model=TriageResponse)
def triage_guides(request: TriageRequest, runtime: ApiRuntime = Depends(get_runtime)) -> TriageResponse:
    results = runtime.service.triage(request.query, request.device, request.category)
    return TriageResponse(query=request.query, device=request.device, results=results)


@router.get("/{guide_id}", response_model=Guide)
def get_guide(guide_id: str, runtime: ApiRuntime = Depends(get_runtime)) -> Guide:
    try:
        return runtime.service.require_guide(guide_id)
    except GuideNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Guide not found") from exc


@router.get("/{guide_id}/steps", response_model=GuideStepsResponse)
def get_guide_steps(
    guide_id: str,
    device: str | None = None,
    hybrid: bool | None = None,
    runtime: ApiRuntime = Depends(get_runtime),
) -> GuideStepsResponse:
    use_hybrid = runtime.config.hybrid_default if hybrid is None else hybrid
    try:
        payload = runtime.service.guide_steps(guide_id, device, use_hybrid)
    except GuideNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Guide not found") from exc
    return GuideStepsResponse(**payload)

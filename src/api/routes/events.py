import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from src.api.app_runtime import ApiRuntime
from src.api.models import Ack, GuideFeedback, UsageEvent
from src.api.routes.deps import get_runtime

router = APIRouter()
LOGGER = logging.getLogger(__name__)


@router.get("/events/recent")
def recent_events(runtime: ApiRuntime = Depends(get_runtime)) -> dict[str, Any]:
    return runtime.repository.get_recent_snapshot()


@router.post("/events", response_model=Ack)
def receive_usage_event(event: UsageEvent, runtime: ApiRuntime = Depends(get_runtime)) -> Ack:
    runtime.repository.append_event(event.model_dump(mode="json"))
    return Ack()


@router.post("/feedback", response_model=Ack)
def receive_feedback(feedback: GuideFeedback, runtime: ApiRuntime = Depends(get_runtime)) -> Ack:
    if runtime.service.get_guide(feedback.guide_id) is None:
        raise HTTPException(status_code=404, detail="Guide not found")
    runtime.repository.append_feedback(feedback.model_dump(mode="json", by_alias=True))
    LOGGER.info(
        "Guide feedback stored. guide_id=%s device=%s helpful=%s",
        feedback.guide_id,
        feedback.device,
        feedback.helpful,
    )
    return Ack()

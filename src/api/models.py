from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

from src.triage.models import Guide, GuideSummary, Step


class TriageRequest(BaseModel):
    query: str = ""
    device: str | None = None
    category: str | None = None


class TriageResponse(BaseModel):
    query: str
    device: str | None = None
    results: list[GuideSummary] = Field(default_factory=list)


class GuideListResponse(BaseModel):
    guides: list[Guide] = Field(default_factory=list)


class CategoryListResponse(BaseModel):
    categories: list[str] = Field(default_factory=list)


class GuideStepsResponse(BaseModel):
    guide_id: str
    device: str | None = None
    hybrid: bool
    steps: list[Step] = Field(default_factory=list)
    commands: list[str] = Field(default_factory=list)
    media: str | None = None


class UsageEvent(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    props: dict | None = None
    ts: int | None = None


class GuideFeedback(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    guide_id: str = Field(alias="guideId")
    device: str
    helpful: bool | None = None
    message: str | None = Field(default=None, max_length=2000)
    received_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class Ack(BaseModel):
    ok: bool = True


class CatalogReloadResult(BaseModel):
    status: str
    guide_count: int
    category_count: int

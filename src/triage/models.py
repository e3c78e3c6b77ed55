from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

ALL_DEVICES = "all"


class Platform(str, Enum):
    WINDOWS = "windows"
    MACOS = "macos"
    IOS = "ios"
    ANDROID = "android"


def coerce_platform(value: Any) -> Platform | None:
    """Map a device tag to a Platform, or None when it is missing or malformed."""
    if isinstance(value, Platform):
        return value
    if not isinstance(value, str):
        return None
    try:
        return Platform(value.strip().lower())
    except ValueError:
        return None


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class Step(FrozenModel):
    text: str
    # Literal copy-paste payload, usually a shell command or a URL.
    copy_text: str | None = Field(default=None, alias="copy")


class Link(FrozenModel):
    label: str
    url: str


class Action(FrozenModel):
    label: str
    copy_text: str | None = Field(default=None, alias="copy")
    url: str | None = None


class StepSet(FrozenModel):
    """Per-device step lists. A missing key falls back to ``all``."""

    windows: tuple[Step, ...] | None = None
    macos: tuple[Step, ...] | None = None
    ios: tuple[Step, ...] | None = None
    android: tuple[Step, ...] | None = None
    all: tuple[Step, ...] | None = None

    @model_validator(mode="after")
    def _require_one_list(self) -> "StepSet":
        keys = [platform.value for platform in Platform] + [ALL_DEVICES]
        for key in keys:
            steps = getattr(self, key)
            if steps is not None and not steps:
                raise ValueError(f"step list for '{key}' is declared but empty")
        if not any(getattr(self, key) for key in keys):
            raise ValueError("a guide needs a non-empty step list for at least one device or 'all'")
        return self

    def supports(self, device: Platform | None) -> bool:
        if device is not None and getattr(self, device.value) is not None:
            return True
        return self.all is not None

    def for_device(self, device: Platform | None) -> tuple[Step, ...]:
        if device is not None:
            steps = getattr(self, device.value)
            if steps is not None:
                return steps
        return self.all if self.all is not None else ()


class MediaSet(FrozenModel):
    windows: str | None = None
    macos: str | None = None
    ios: str | None = None
    android: str | None = None
    all: str | None = None

    def for_device(self, device: Platform | None) -> str | None:
        if device is not None:
            asset = getattr(self, device.value)
            if asset is not None:
                return asset
        return self.all


class GuideSummary(FrozenModel):
    id: str
    title: str
    minutes: int | None = None
    why: str | None = None
    category: str


class Guide(FrozenModel):
    id: str
    title: str
    category: str
    minutes: int | None = None
    why: str | None = None
    keywords: tuple[str, ...] = ()
    steps: StepSet
    links: tuple[Link, ...] = ()
    actions: tuple[Action, ...] = ()
    tips: tuple[str, ...] = ()
    media: MediaSet | None = None

    def summary(self) -> GuideSummary:
        return GuideSummary(
            id=self.id,
            title=self.title,
            minutes=self.minutes,
            why=self.why,
            category=self.category,
        )

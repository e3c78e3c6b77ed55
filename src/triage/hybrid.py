from collections.abc import Iterable
from typing import Any

from src.triage.catalog import GuideCatalog, default_catalog
from src.triage.models import Guide, Step, coerce_platform


def resolve_steps(guide: Guide, device: Any) -> list[Step]:
    return list(guide.steps.for_device(coerce_platform(device)))


def resolve_media(guide: Guide, device: Any) -> str | None:
    if guide.media is None:
        return None
    return guide.media.for_device(coerce_platform(device))


def _step_key(step: Step) -> tuple[str, str]:
    return step.text.lower(), (step.copy_text or "").lower()


def dedupe_steps(steps: Iterable[Step]) -> list[Step]:
    seen: set[tuple[str, str]] = set()
    unique: list[Step] = []
    for step in steps:
        key = _step_key(step)
        if key in seen:
            continue
        seen.add(key)
        unique.append(step)
    return unique


def build_hybrid_steps(
    guide_id: str,
    device: Any,
    base_steps: Iterable[Step],
    *,
    catalog: GuideCatalog | None = None,
) -> list[Step]:
    """Append related guides' device steps to ``base_steps`` and drop repeats.

    Related guides are visited in declared order; ids missing from the
    catalog are skipped.
    """
    snapshot = catalog if catalog is not None else default_catalog()
    platform = coerce_platform(device)
    merged = list(base_steps)
    for related_id in snapshot.related_ids(guide_id):
        related = snapshot.get_guide(related_id)
        if related is None:
            continue
        merged.extend(related.steps.for_device(platform))
    return dedupe_steps(merged)


def collect_copy_payloads(steps: Iterable[Step]) -> list[str]:
    return [step.copy_text for step in steps if step.copy_text]

from dataclasses import dataclass

from src.api.config import ApiConfig
from src.api.repositories.event_repository import EventRepository
from src.api.services.triage_service import TriageService


@dataclass
class ApiRuntime:
    config: ApiConfig
    service: TriageService
    repository: EventRepository


def build_runtime(config: ApiConfig) -> ApiRuntime:
    return ApiRuntime(
        config=config,
        service=TriageService(
            catalog_path=config.catalog_path,
            max_results=config.triage_max_results,
            default_device=config.default_device,
        ),
        repository=EventRepository(
            event_log_path=config.event_log_path,
            feedback_log_path=config.feedback_log_path,
            recents_max=config.recents_max,
        ),
    )

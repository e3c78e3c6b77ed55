import json
from pathlib import Path
from threading import Lock
from typing import Any


class EventRepository:
    def __init__(self, event_log_path: str, feedback_log_path: str, recents_max: int = 100) -> None:
        self.event_log_path = Path(event_log_path)
        self.feedback_log_path = Path(feedback_log_path)
        self.recents_max = recents_max
        self._recent_events: list[dict[str, Any]] = []
        self._recent_feedback: list[dict[str, Any]] = []
        self._lock = Lock()

    @staticmethod
    def _append_jsonl(path: Path, payload: dict[str, Any]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as fp:
            fp.write(json.dumps(payload, ensure_ascii=False) + "\n")

    def _push_recent(self, items: list[dict[str, Any]], payload: dict[str, Any]) -> None:
        items.insert(0, payload)
        if len(items) > self.recents_max:
            items.pop()

    def append_event(self, payload: dict[str, Any]) -> None:
        with self._lock:
            self._append_jsonl(self.event_log_path, payload)
            self._push_recent(self._recent_events, payload)

    def append_feedback(self, payload: dict[str, Any]) -> None:
        with self._lock:
            self._append_jsonl(self.feedback_log_path, payload)
            self._push_recent(self._recent_feedback, payload)

    def get_recent_snapshot(self) -> dict[str, Any]:
        with self._lock:
            events = list(self._recent_events)
            feedback = list(self._recent_feedback)
            return {
                "event_count": len(events),
                "feedback_count": len(feedback),
                "events": events,
                "feedback": feedback,
            }

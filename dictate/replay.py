"""Replay mode: feed a recorded backend event script through the session controller.

An event script is a YAML list of records such as::

    - event: recording-started
    - event: partial-text
      payload: "hello"
    - event: recording-stopped
    - event: session-complete
      payload: "hello world ."

It exercises the same code path a live recognizer drives, which makes it
useful for reproducing ordering problems between events.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from .events.bus import EventBus
from .models.events import BackendEvent
from .models.session import SessionSnapshot
from .services.session_controller import SessionController

logger = logging.getLogger(__name__)


def load_event_script(path: str) -> List[Tuple[BackendEvent, Optional[str]]]:
    """Load and validate an event script.

    Args:
        path: Path to the YAML script

    Returns:
        List of (event, payload) pairs in script order

    Raises:
        FileNotFoundError: If the script does not exist
        ValueError: If the script is malformed
    """
    script_file = Path(path)
    if not script_file.exists():
        raise FileNotFoundError(f"Event script not found: {script_file}")

    try:
        with open(script_file, 'r', encoding='utf-8') as f:
            records = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in event script: {e}")

    if not isinstance(records, list):
        raise ValueError("Event script must be a list of events")

    return [_parse_record(i, record) for i, record in enumerate(records, 1)]


def _parse_record(index: int, record: Any) -> Tuple[BackendEvent, Optional[str]]:
    if not isinstance(record, dict) or "event" not in record:
        raise ValueError(f"Record #{index} must be a mapping with an 'event' key")

    event = BackendEvent.from_tag(str(record["event"]))
    payload = record.get("payload")
    if event.has_payload:
        if payload is None:
            raise ValueError(f"Record #{index} ({event.value}) requires a payload")
        return event, str(payload)
    return event, None


async def replay_events(controller: SessionController,
                        bus: EventBus,
                        events: List[Tuple[BackendEvent, Optional[str]]]) -> SessionSnapshot:
    """Publish events in order and wait for resulting persistence.

    Args:
        controller: Controller subscribed to ``bus``
        bus: Bus to publish on
        events: (event, payload) pairs

    Returns:
        Session snapshot after the last event
    """
    logger.info(f"Replaying {len(events)} backend events")
    for event, payload in events:
        bus.publish(event, payload)
    await controller.drain()
    return controller.snapshot()


def summarize(snapshot: SessionSnapshot) -> Dict[str, Any]:
    """Plain-data summary of a snapshot for logging and tests."""
    return {
        "state": snapshot.state.value,
        "recording": snapshot.recording,
        "display_text": snapshot.display_text,
        "error_message": snapshot.error_message,
    }

# Tracking services layer
# Business logic that orchestrates database queries
# Services own session lifecycle via create_session()

from rfid_tracker.services.errors import (
    PersistenceError,
    ReferenceNotFound,
)
from rfid_tracker.services.event_guard import before_create
from rfid_tracker.services.events import (
    create_event,
    get_event,
    list_events,
)
from rfid_tracker.services.registry import (
    create_asset,
    create_reader,
    create_tag,
    get_asset_detail,
    list_readers,
    list_tags,
)

__all__ = [
    # errors.py
    "PersistenceError",
    "ReferenceNotFound",
    # event_guard.py
    "before_create",
    # events.py
    "create_event",
    "get_event",
    "list_events",
    # registry.py
    "create_asset",
    "create_reader",
    "create_tag",
    "get_asset_detail",
    "list_readers",
    "list_tags",
]

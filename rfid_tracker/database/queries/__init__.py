# Re-export public API from query modules
# Pure atomic database queries only - no business logic or orchestration

from rfid_tracker.database.queries.assets import (
    asset_exists_for_tag_id,
    get_asset_by_id,
    get_asset_by_tag_id,
    insert_asset,
    set_asset_current_reader,
)

from rfid_tracker.database.queries.events import (
    get_event_by_id,
    insert_event,
    list_events_page,
)

from rfid_tracker.database.queries.readers import (
    get_reader_by_value,
    insert_reader,
    list_readers_page,
    reader_exists,
)

from rfid_tracker.database.queries.tags import (
    get_tag_by_value,
    insert_tag,
    list_tags_page,
    tag_exists,
)

__all__ = [
    # assets.py
    "asset_exists_for_tag_id",
    "get_asset_by_id",
    "get_asset_by_tag_id",
    "insert_asset",
    "set_asset_current_reader",
    # events.py
    "get_event_by_id",
    "insert_event",
    "list_events_page",
    # readers.py
    "get_reader_by_value",
    "insert_reader",
    "list_readers_page",
    "reader_exists",
    # tags.py
    "get_tag_by_value",
    "insert_tag",
    "list_tags_page",
    "tag_exists",
]

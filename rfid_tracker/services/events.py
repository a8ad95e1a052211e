import logging

from sqlalchemy.exc import SQLAlchemyError

from rfid_tracker.database.db import create_session
from rfid_tracker.database.queries import (
    get_event_by_id,
    insert_event,
    list_events_page,
)
from rfid_tracker.helpers import clamp_page, normalize_identifier
from rfid_tracker.services.errors import PersistenceError
from rfid_tracker.services.event_guard import before_create
from rfid_tracker.services.schemas import (
    CreateEventResult,
    EventData,
    ListEventsResult,
    extract_event_data,
)


def create_event(tag, reader) -> CreateEventResult:
    """
    Record a tag read.
    Runs the pre-create check, inserts the event and commits both in one
    transaction. Nothing is committed if any step fails.
    """
    with create_session() as session:
        guard = before_create(session, {"tag": tag, "reader": reader})

        row = insert_event(
            session,
            tag=guard.tag,
            reader=guard.reader,
            asset_id=guard.asset_id,
            reader_id=guard.reader_id,
        )
        data = extract_event_data(row)
        try:
            session.commit()
        except SQLAlchemyError as e:
            logging.exception("Failed to commit event for tag=%s reader=%s", guard.tag, guard.reader)
            raise PersistenceError(
                f"Failed to commit event for tag {guard.tag!r}", asset_id=guard.asset_id
            ) from e

    return CreateEventResult(
        event=data,
        reader_changed=guard.reader_changed,
        previous_reader_id=guard.previous_reader_id,
    )


def get_event(event_id: str) -> EventData | None:
    with create_session() as session:
        row = get_event_by_id(session, event_id=event_id)
        if row is None:
            return None
        return extract_event_data(row)


def list_events(
    tag=None,
    reader=None,
    limit: int = 100,
    offset: int = 0,
) -> ListEventsResult:
    """
    List events newest first, optionally filtered by tag and/or reader.
    """
    limit, offset = clamp_page(limit, offset)
    tag = normalize_identifier(tag) if tag is not None else None
    reader = normalize_identifier(reader) if reader is not None else None

    with create_session() as session:
        rows, total = list_events_page(
            session,
            tag=tag,
            reader=reader,
            limit=limit,
            offset=offset,
        )
        items = [extract_event_data(r) for r in rows]

    return ListEventsResult(items=items, total=total)

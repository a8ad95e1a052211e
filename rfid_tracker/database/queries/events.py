from sqlalchemy import select
from sqlalchemy.orm import Session

from rfid_tracker.database.models import Event
from rfid_tracker.database.queries.common import count_rows
from rfid_tracker.helpers import utcnow


def insert_event(
    session: Session,
    tag: str,
    reader: str,
    asset_id: str | None = None,
    reader_id: str | None = None,
) -> Event:
    row = Event(
        tag=tag,
        reader=reader,
        asset_id=asset_id,
        reader_id=reader_id,
        created_at=utcnow(),
    )
    session.add(row)
    session.flush()
    return row


def get_event_by_id(session: Session, event_id: str) -> Event | None:
    return session.get(Event, event_id)


def list_events_page(
    session: Session,
    tag: str | None = None,
    reader: str | None = None,
    limit: int = 100,
    offset: int = 0,
) -> tuple[list[Event], int]:
    base = select(Event)
    if tag is not None:
        base = base.where(Event.tag == tag)
    if reader is not None:
        base = base.where(Event.reader == reader)

    total = count_rows(session, base)
    rows = (
        session.execute(
            base.order_by(Event.created_at.desc(), Event.id.asc()).limit(limit).offset(offset)
        )
    ).scalars().all()
    return list(rows), total

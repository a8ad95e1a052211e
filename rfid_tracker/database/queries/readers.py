from sqlalchemy import select
from sqlalchemy.orm import Session

from rfid_tracker.database.models import Reader
from rfid_tracker.database.queries.common import count_rows


def get_reader_by_value(session: Session, reader: str) -> Reader | None:
    return (
        session.execute(select(Reader).where(Reader.reader == reader).limit(1))
    ).scalars().first()


def reader_exists(session: Session, reader: str) -> bool:
    return (
        session.execute(select(Reader.id).where(Reader.reader == reader).limit(1))
    ).first() is not None


def insert_reader(session: Session, reader: str, name: str | None = None) -> Reader:
    row = Reader(reader=reader, name=name)
    session.add(row)
    session.flush()
    return row


def list_readers_page(
    session: Session,
    limit: int = 100,
    offset: int = 0,
) -> tuple[list[Reader], int]:
    base = select(Reader)
    total = count_rows(session, base)
    rows = (
        session.execute(base.order_by(Reader.reader.asc()).limit(limit).offset(offset))
    ).scalars().all()
    return list(rows), total

from sqlalchemy import select
from sqlalchemy.orm import Session

from rfid_tracker.database.models import Tag
from rfid_tracker.database.queries.common import count_rows
from rfid_tracker.helpers import escape_like_prefix


def get_tag_by_value(session: Session, tag: str) -> Tag | None:
    return (
        session.execute(select(Tag).where(Tag.tag == tag).limit(1))
    ).scalars().first()


def tag_exists(session: Session, tag: str) -> bool:
    return (
        session.execute(select(Tag.id).where(Tag.tag == tag).limit(1))
    ).first() is not None


def insert_tag(session: Session, tag: str) -> Tag:
    row = Tag(tag=tag)
    session.add(row)
    session.flush()
    return row


def list_tags_page(
    session: Session,
    prefix: str | None = None,
    limit: int = 100,
    offset: int = 0,
) -> tuple[list[Tag], int]:
    base = select(Tag)
    if prefix:
        escaped, esc = escape_like_prefix(prefix.strip())
        base = base.where(Tag.tag.like(escaped + "%", escape=esc))

    total = count_rows(session, base)
    rows = (
        session.execute(base.order_by(Tag.tag.asc()).limit(limit).offset(offset))
    ).scalars().all()
    return list(rows), total

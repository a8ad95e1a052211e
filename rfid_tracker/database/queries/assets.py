from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload

from rfid_tracker.database.models import Asset
from rfid_tracker.helpers import utcnow


def get_asset_by_tag_id(
    session: Session,
    tag_id: str,
    for_update: bool = False,
) -> Asset | None:
    """Return the asset bound to a tag.

    With for_update=True the row is locked until the transaction ends on
    backends that support SELECT ... FOR UPDATE (SQLite ignores it).
    """
    stmt = select(Asset).where(Asset.tag_id == tag_id).limit(1)
    if for_update:
        stmt = stmt.with_for_update()
    return (session.execute(stmt)).scalars().first()


def asset_exists_for_tag_id(session: Session, tag_id: str) -> bool:
    return (
        session.execute(select(Asset.id).where(Asset.tag_id == tag_id).limit(1))
    ).first() is not None


def get_asset_by_id(session: Session, asset_id: str) -> Asset | None:
    return (
        session.execute(
            select(Asset)
            .options(joinedload(Asset.tag), joinedload(Asset.current_reader))
            .where(Asset.id == asset_id)
        )
    ).scalars().first()


def insert_asset(session: Session, tag_id: str, name: str | None = None) -> Asset:
    now = utcnow()
    row = Asset(tag_id=tag_id, name=name, created_at=now, updated_at=now)
    session.add(row)
    session.flush()
    return row


def set_asset_current_reader(session: Session, asset: Asset, reader_id: str) -> None:
    """Point an asset at a reader and flush the UPDATE."""
    asset.current_reader_id = reader_id
    asset.updated_at = utcnow()
    session.flush()

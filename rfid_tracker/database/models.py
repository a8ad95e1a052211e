import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Index, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from rfid_tracker.helpers import utcnow


def _new_id() -> str:
    return str(uuid.uuid4())


class Base(DeclarativeBase):
    pass


class Tag(Base):
    __tablename__ = "tags"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    tag: Mapped[str] = mapped_column(String(256), nullable=False, unique=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False, default=utcnow)

    asset: Mapped[Optional["Asset"]] = relationship(back_populates="tag", uselist=False)

    def __repr__(self) -> str:
        return f"<Tag id={self.id} tag={self.tag!r}>"


class Reader(Base):
    __tablename__ = "readers"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    reader: Mapped[str] = mapped_column(String(256), nullable=False, unique=True)
    name: Mapped[str | None] = mapped_column(String(512), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False, default=utcnow)

    def __repr__(self) -> str:
        return f"<Reader id={self.id} reader={self.reader!r}>"


class Asset(Base):
    __tablename__ = "assets"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    name: Mapped[str | None] = mapped_column(String(512), nullable=True)
    tag_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("tags.id", ondelete="RESTRICT"), nullable=False, unique=True
    )
    # Denormalized pointer to the reader that most recently saw this asset.
    current_reader_id: Mapped[str | None] = mapped_column(
        String(36), ForeignKey("readers.id", ondelete="SET NULL"), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False, default=utcnow)

    tag: Mapped[Tag] = relationship(back_populates="asset")
    current_reader: Mapped[Reader | None] = relationship(foreign_keys=[current_reader_id])

    __table_args__ = (
        Index("ix_assets_current_reader_id", "current_reader_id"),
    )

    def __repr__(self) -> str:
        return f"<Asset id={self.id} tag_id={self.tag_id} current_reader_id={self.current_reader_id}>"


class Event(Base):
    __tablename__ = "events"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    # Raw identifiers as supplied by the caller, after string coercion.
    tag: Mapped[str] = mapped_column(String(256), nullable=False)
    reader: Mapped[str] = mapped_column(String(256), nullable=False)
    asset_id: Mapped[str | None] = mapped_column(
        String(36), ForeignKey("assets.id", ondelete="SET NULL"), nullable=True
    )
    reader_id: Mapped[str | None] = mapped_column(
        String(36), ForeignKey("readers.id", ondelete="SET NULL"), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False, default=utcnow)

    __table_args__ = (
        Index("ix_events_tag", "tag"),
        Index("ix_events_reader", "reader"),
        Index("ix_events_asset_id_created_at", "asset_id", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Event id={self.id} tag={self.tag!r} reader={self.reader!r}>"

from dataclasses import dataclass
from datetime import datetime

from rfid_tracker.database.models import Asset, Event, Reader, Tag


@dataclass(frozen=True)
class TagData:
    id: str
    tag: str
    created_at: datetime


@dataclass(frozen=True)
class ReaderData:
    id: str
    reader: str
    name: str | None
    created_at: datetime


@dataclass(frozen=True)
class AssetData:
    id: str
    name: str | None
    tag_id: str
    current_reader_id: str | None
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class AssetDetailResult:
    asset: AssetData
    tag: str
    current_reader: str | None


@dataclass(frozen=True)
class EventData:
    id: str
    tag: str
    reader: str
    asset_id: str | None
    reader_id: str | None
    created_at: datetime


@dataclass(frozen=True)
class GuardResult:
    """Outcome of a successful pre-create check."""
    tag: str
    reader: str
    tag_id: str
    asset_id: str
    reader_id: str
    previous_reader_id: str | None
    reader_changed: bool


@dataclass(frozen=True)
class CreateEventResult:
    event: EventData
    reader_changed: bool
    previous_reader_id: str | None


@dataclass(frozen=True)
class ListEventsResult:
    items: list[EventData]
    total: int


@dataclass(frozen=True)
class ListTagsResult:
    items: list[TagData]
    total: int


@dataclass(frozen=True)
class ListReadersResult:
    items: list[ReaderData]
    total: int


def extract_tag_data(tag: Tag) -> TagData:
    return TagData(id=tag.id, tag=tag.tag, created_at=tag.created_at)


def extract_reader_data(reader: Reader) -> ReaderData:
    return ReaderData(
        id=reader.id,
        reader=reader.reader,
        name=reader.name,
        created_at=reader.created_at,
    )


def extract_asset_data(asset: Asset) -> AssetData:
    return AssetData(
        id=asset.id,
        name=asset.name,
        tag_id=asset.tag_id,
        current_reader_id=asset.current_reader_id,
        created_at=asset.created_at,
        updated_at=asset.updated_at,
    )


def extract_event_data(event: Event) -> EventData:
    return EventData(
        id=event.id,
        tag=event.tag,
        reader=event.reader,
        asset_id=event.asset_id,
        reader_id=event.reader_id,
        created_at=event.created_at,
    )

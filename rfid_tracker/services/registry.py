"""
Reference records that events resolve against.

Business logic for:
- create_tag / list_tags: RFID tag identifiers
- create_reader / list_readers: scanning devices
- create_asset / get_asset_detail: tracked items, one per tag
"""
from sqlalchemy.exc import IntegrityError

from rfid_tracker.database.db import create_session
from rfid_tracker.database.queries import (
    asset_exists_for_tag_id,
    get_asset_by_id,
    get_tag_by_value,
    insert_asset,
    insert_reader,
    insert_tag,
    list_readers_page,
    list_tags_page,
    reader_exists,
    tag_exists,
)
from rfid_tracker.helpers import clamp_page, normalize_identifier
from rfid_tracker.services.errors import ReferenceNotFound
from rfid_tracker.services.schemas import (
    AssetData,
    AssetDetailResult,
    ListReadersResult,
    ListTagsResult,
    ReaderData,
    TagData,
    extract_asset_data,
    extract_reader_data,
    extract_tag_data,
)


def create_tag(tag) -> TagData:
    value = normalize_identifier(tag)
    with create_session() as session:
        if tag_exists(session, tag=value):
            raise ValueError(f"Tag {value!r} already exists")
        try:
            row = insert_tag(session, tag=value)
        except IntegrityError as e:
            raise ValueError(f"Tag {value!r} already exists") from e
        data = extract_tag_data(row)
        session.commit()
    return data


def list_tags(
    prefix: str | None = None,
    limit: int = 100,
    offset: int = 0,
) -> ListTagsResult:
    limit, offset = clamp_page(limit, offset)
    with create_session() as session:
        rows, total = list_tags_page(session, prefix=prefix, limit=limit, offset=offset)
        items = [extract_tag_data(r) for r in rows]
    return ListTagsResult(items=items, total=total)


def create_reader(reader, name: str | None = None) -> ReaderData:
    value = normalize_identifier(reader)
    with create_session() as session:
        if reader_exists(session, reader=value):
            raise ValueError(f"Reader {value!r} already exists")
        try:
            row = insert_reader(session, reader=value, name=name)
        except IntegrityError as e:
            raise ValueError(f"Reader {value!r} already exists") from e
        data = extract_reader_data(row)
        session.commit()
    return data


def list_readers(limit: int = 100, offset: int = 0) -> ListReadersResult:
    limit, offset = clamp_page(limit, offset)
    with create_session() as session:
        rows, total = list_readers_page(session, limit=limit, offset=offset)
        items = [extract_reader_data(r) for r in rows]
    return ListReadersResult(items=items, total=total)


def create_asset(tag, name: str | None = None) -> AssetData:
    """
    Bind a new asset to an existing tag.
    A tag carries at most one asset.
    """
    value = normalize_identifier(tag)
    with create_session() as session:
        tag_row = get_tag_by_value(session, tag=value)
        if tag_row is None:
            raise ReferenceNotFound("tag", value)
        if asset_exists_for_tag_id(session, tag_id=tag_row.id):
            raise ValueError(f"Tag {value!r} is already assigned to an asset")
        try:
            row = insert_asset(session, tag_id=tag_row.id, name=name)
        except IntegrityError as e:
            raise ValueError(f"Tag {value!r} is already assigned to an asset") from e
        data = extract_asset_data(row)
        session.commit()
    return data


def get_asset_detail(asset_id: str) -> AssetDetailResult | None:
    with create_session() as session:
        row = get_asset_by_id(session, asset_id=asset_id)
        if row is None:
            return None
        return AssetDetailResult(
            asset=extract_asset_data(row),
            tag=row.tag.tag,
            current_reader=row.current_reader.reader if row.current_reader else None,
        )

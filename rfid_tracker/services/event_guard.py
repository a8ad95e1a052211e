"""
Pre-create check for read events.

An event may only be stored when its tag resolves to a Tag, that Tag is
bound to an Asset, and its reader resolves to a Reader. On success the
Asset's current_reader_id is pointed at the Reader, unless it already is.

before_create() runs inside the caller's session and never commits: the
caller inserts the Event in the same transaction and commits once, so the
asset pointer and the event land together or not at all. The asset row is
selected FOR UPDATE; on backends without row locks concurrent reads of the
same asset are last-write-wins.
"""
import logging
from typing import Any, Mapping

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from rfid_tracker.database.queries import (
    get_asset_by_tag_id,
    get_reader_by_value,
    get_tag_by_value,
    set_asset_current_reader,
)
from rfid_tracker.helpers import normalize_identifier
from rfid_tracker.services.errors import PersistenceError, ReferenceNotFound
from rfid_tracker.services.schemas import GuardResult


def _require_identifier(values: Mapping[str, Any], field: str) -> str:
    if field not in values:
        raise ValueError(f"event values must include '{field}'")
    try:
        return normalize_identifier(values[field])
    except ValueError as e:
        raise ValueError(f"invalid '{field}': {e}") from e


def before_create(session: Session, values: Mapping[str, Any]) -> GuardResult:
    """
    Validate the tag -> asset -> reader chain for a candidate event and sync
    the asset's current reader.

    Raises ReferenceNotFound for a missing tag, asset or reader, and
    PersistenceError when the asset update cannot be flushed. Errors raised
    by the lookups themselves propagate unchanged.
    """
    tag_value = _require_identifier(values, "tag")
    reader_value = _require_identifier(values, "reader")

    tag = get_tag_by_value(session, tag=tag_value)
    if tag is None:
        raise ReferenceNotFound("tag", tag_value)

    asset = get_asset_by_tag_id(session, tag_id=tag.id, for_update=True)
    if asset is None:
        raise ReferenceNotFound("asset-for-tag", tag_value)

    reader = get_reader_by_value(session, reader=reader_value)
    if reader is None:
        raise ReferenceNotFound("reader", reader_value)

    previous_reader_id = asset.current_reader_id
    if previous_reader_id == reader.id:
        return GuardResult(
            tag=tag_value,
            reader=reader_value,
            tag_id=tag.id,
            asset_id=asset.id,
            reader_id=reader.id,
            previous_reader_id=previous_reader_id,
            reader_changed=False,
        )

    try:
        set_asset_current_reader(session, asset=asset, reader_id=reader.id)
    except SQLAlchemyError as e:
        logging.exception(
            "Failed to move asset %s to reader %s", asset.id, reader.id
        )
        raise PersistenceError(
            f"Failed to update current reader of asset {asset.id}", asset_id=asset.id
        ) from e

    logging.info(
        "Asset %s current reader %s -> %s (tag=%s)",
        asset.id,
        previous_reader_id,
        reader.id,
        tag_value,
    )
    return GuardResult(
        tag=tag_value,
        reader=reader_value,
        tag_id=tag.id,
        asset_id=asset.id,
        reader_id=reader.id,
        previous_reader_id=previous_reader_id,
        reader_changed=True,
    )

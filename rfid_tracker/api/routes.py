import logging
import uuid
from typing import Any

from aiohttp import web
from pydantic import ValidationError

from rfid_tracker.api import schemas_in, schemas_out
from rfid_tracker.services import (
    PersistenceError,
    ReferenceNotFound,
    create_asset,
    create_event,
    create_reader,
    create_tag,
    get_asset_detail,
    get_event,
    list_events,
    list_readers,
    list_tags,
)

ROUTES = web.RouteTableDef()

# UUID regex (canonical hyphenated form, case-insensitive)
UUID_RE = r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"


def get_query_dict(request: web.Request) -> dict[str, Any]:
    """
    Gets a dictionary of query parameters from the request.

    'request.query' is a MultiMapping[str], needs to be converted to a dictionary to be validated by Pydantic.
    """
    query_dict = {
        key: request.query.getall(key)
        if len(request.query.getall(key)) > 1
        else request.query.get(key)
        for key in request.query.keys()
    }
    return query_dict


def register_tracking_system(app: web.Application) -> None:
    app.add_routes(ROUTES)


def _build_error_response(
    status: int, code: str, message: str, details: dict | None = None
) -> web.Response:
    return web.json_response(
        {"error": {"code": code, "message": message, "details": details or {}}},
        status=status,
    )


def _build_validation_error_response(code: str, ve: ValidationError) -> web.Response:
    return _build_error_response(400, code, "Validation failed.", {"errors": ve.json()})


def _build_reference_error_response(e: ReferenceNotFound) -> web.Response:
    return _build_error_response(
        404, "REFERENCE_NOT_FOUND", str(e), {"kind": e.kind, "value": e.value}
    )


async def _read_body(request: web.Request, model):
    """Parse and validate a JSON body; returns (body, error_response)."""
    try:
        payload = await request.json()
    except Exception:
        return None, _build_error_response(
            400, "INVALID_JSON", "Request body must be valid JSON."
        )
    try:
        return model.model_validate(payload), None
    except ValidationError as ve:
        return None, _build_validation_error_response("INVALID_BODY", ve)


@ROUTES.post("/api/events")
async def create_event_route(request: web.Request) -> web.Response:
    """
    POST request to record a tag read.
    """
    body, error = await _read_body(request, schemas_in.CreateEventBody)
    if error is not None:
        return error

    try:
        result = create_event(tag=body.tag, reader=body.reader)
    except ReferenceNotFound as e:
        return _build_reference_error_response(e)
    except PersistenceError as e:
        return _build_error_response(
            503, "PERSISTENCE_FAILED", str(e), {"asset_id": e.asset_id}
        )
    except Exception:
        logging.exception("create_event failed for tag=%s, reader=%s", body.tag, body.reader)
        return _build_error_response(500, "INTERNAL", "Unexpected server error.")

    payload = schemas_out.EventCreated(
        id=result.event.id,
        tag=result.event.tag,
        reader=result.event.reader,
        asset_id=result.event.asset_id,
        reader_id=result.event.reader_id,
        created_at=result.event.created_at,
        reader_changed=result.reader_changed,
        previous_reader_id=result.previous_reader_id,
    )
    return web.json_response(payload.model_dump(mode="json"), status=201)


@ROUTES.get("/api/events")
async def list_events_route(request: web.Request) -> web.Response:
    try:
        q = schemas_in.ListEventsQuery.model_validate(get_query_dict(request))
    except ValidationError as ve:
        return _build_validation_error_response("INVALID_QUERY", ve)

    result = list_events(tag=q.tag, reader=q.reader, limit=q.limit, offset=q.offset)
    events = [schemas_out.Event.model_validate(item) for item in result.items]
    payload = schemas_out.EventsList(
        events=events,
        total=result.total,
        has_more=(q.offset + len(events)) < result.total,
    )
    return web.json_response(payload.model_dump(mode="json"))


@ROUTES.get(f"/api/events/{{id:{UUID_RE}}}")
async def get_event_route(request: web.Request) -> web.Response:
    event_id = str(uuid.UUID(request.match_info["id"]))
    result = get_event(event_id=event_id)
    if result is None:
        return _build_error_response(
            404, "EVENT_NOT_FOUND", f"Event {event_id} not found", {"id": event_id}
        )
    return web.json_response(schemas_out.Event.model_validate(result).model_dump(mode="json"))


@ROUTES.post("/api/tags")
async def create_tag_route(request: web.Request) -> web.Response:
    body, error = await _read_body(request, schemas_in.CreateTagBody)
    if error is not None:
        return error

    try:
        result = create_tag(tag=body.tag)
    except ValueError as e:
        return _build_error_response(409, "ALREADY_EXISTS", str(e), {"tag": body.tag})
    except Exception:
        logging.exception("create_tag failed for tag=%s", body.tag)
        return _build_error_response(500, "INTERNAL", "Unexpected server error.")
    return web.json_response(
        schemas_out.Tag.model_validate(result).model_dump(mode="json"), status=201
    )


@ROUTES.get("/api/tags")
async def list_tags_route(request: web.Request) -> web.Response:
    try:
        q = schemas_in.ListTagsQuery.model_validate(get_query_dict(request))
    except ValidationError as ve:
        return _build_validation_error_response("INVALID_QUERY", ve)

    result = list_tags(prefix=q.prefix, limit=q.limit, offset=q.offset)
    tags = [schemas_out.Tag.model_validate(item) for item in result.items]
    payload = schemas_out.TagsList(
        tags=tags,
        total=result.total,
        has_more=(q.offset + len(tags)) < result.total,
    )
    return web.json_response(payload.model_dump(mode="json"))


@ROUTES.post("/api/readers")
async def create_reader_route(request: web.Request) -> web.Response:
    body, error = await _read_body(request, schemas_in.CreateReaderBody)
    if error is not None:
        return error

    try:
        result = create_reader(reader=body.reader, name=body.name)
    except ValueError as e:
        return _build_error_response(409, "ALREADY_EXISTS", str(e), {"reader": body.reader})
    except Exception:
        logging.exception("create_reader failed for reader=%s", body.reader)
        return _build_error_response(500, "INTERNAL", "Unexpected server error.")
    return web.json_response(
        schemas_out.Reader.model_validate(result).model_dump(mode="json"), status=201
    )


@ROUTES.get("/api/readers")
async def list_readers_route(request: web.Request) -> web.Response:
    try:
        q = schemas_in.ListReadersQuery.model_validate(get_query_dict(request))
    except ValidationError as ve:
        return _build_validation_error_response("INVALID_QUERY", ve)

    result = list_readers(limit=q.limit, offset=q.offset)
    readers = [schemas_out.Reader.model_validate(item) for item in result.items]
    payload = schemas_out.ReadersList(
        readers=readers,
        total=result.total,
        has_more=(q.offset + len(readers)) < result.total,
    )
    return web.json_response(payload.model_dump(mode="json"))


@ROUTES.post("/api/assets")
async def create_asset_route(request: web.Request) -> web.Response:
    body, error = await _read_body(request, schemas_in.CreateAssetBody)
    if error is not None:
        return error

    try:
        result = create_asset(tag=body.tag, name=body.name)
    except ReferenceNotFound as e:
        return _build_reference_error_response(e)
    except ValueError as e:
        return _build_error_response(409, "ALREADY_EXISTS", str(e), {"tag": body.tag})
    except Exception:
        logging.exception("create_asset failed for tag=%s", body.tag)
        return _build_error_response(500, "INTERNAL", "Unexpected server error.")
    return web.json_response(
        schemas_out.Asset.model_validate(result).model_dump(mode="json"), status=201
    )


@ROUTES.get(f"/api/assets/{{id:{UUID_RE}}}")
async def get_asset_route(request: web.Request) -> web.Response:
    asset_id = str(uuid.UUID(request.match_info["id"]))
    result = get_asset_detail(asset_id=asset_id)
    if result is None:
        return _build_error_response(
            404, "ASSET_NOT_FOUND", f"Asset {asset_id} not found", {"id": asset_id}
        )

    payload = schemas_out.AssetDetail(
        id=result.asset.id,
        name=result.asset.name,
        tag_id=result.asset.tag_id,
        current_reader_id=result.asset.current_reader_id,
        created_at=result.asset.created_at,
        updated_at=result.asset.updated_at,
        tag=result.tag,
        current_reader=result.current_reader,
    )
    return web.json_response(payload.model_dump(mode="json"))

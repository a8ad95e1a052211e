from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator


def _coerce_identifier(v: Any) -> str:
    s = str(v).strip()
    if not s:
        raise ValueError("must be a non-empty identifier")
    return s


class CreateEventBody(BaseModel):
    """Tag read reported by a reader. Numeric identifiers are accepted and compared as strings."""
    model_config = ConfigDict(extra="ignore")

    tag: StrictStr | StrictInt
    reader: StrictStr | StrictInt

    @field_validator("tag", "reader", mode="after")
    @classmethod
    def _as_str(cls, v):
        return _coerce_identifier(v)


class CreateTagBody(BaseModel):
    model_config = ConfigDict(extra="forbid")

    tag: StrictStr | StrictInt

    @field_validator("tag", mode="after")
    @classmethod
    def _as_str(cls, v):
        return _coerce_identifier(v)


class CreateReaderBody(BaseModel):
    model_config = ConfigDict(extra="forbid")

    reader: StrictStr | StrictInt
    name: str | None = Field(default=None, max_length=512)

    @field_validator("reader", mode="after")
    @classmethod
    def _as_str(cls, v):
        return _coerce_identifier(v)


class CreateAssetBody(BaseModel):
    model_config = ConfigDict(extra="forbid")

    tag: StrictStr | StrictInt
    name: str | None = Field(default=None, max_length=512)

    @field_validator("tag", mode="after")
    @classmethod
    def _as_str(cls, v):
        return _coerce_identifier(v)


class ListEventsQuery(BaseModel):
    tag: str | None = None
    reader: str | None = None
    limit: int = Field(default=100, ge=1, le=1000)
    offset: int = Field(default=0, ge=0)


class ListTagsQuery(BaseModel):
    prefix: str | None = None
    limit: int = Field(default=100, ge=1, le=1000)
    offset: int = Field(default=0, ge=0)


class ListReadersQuery(BaseModel):
    limit: int = Field(default=100, ge=1, le=1000)
    offset: int = Field(default=0, ge=0)

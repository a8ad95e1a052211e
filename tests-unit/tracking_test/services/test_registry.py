"""Tests for tag, reader and asset registry services."""
from unittest.mock import patch

import pytest
from sqlalchemy.exc import IntegrityError

from rfid_tracker.services import (
    ReferenceNotFound,
    create_asset,
    create_event,
    create_reader,
    create_tag,
    get_asset_detail,
    list_readers,
    list_tags,
)


class TestTags:
    def test_create_and_list(self, mock_create_session):
        created = create_tag("A1")
        create_tag(1002)

        result = list_tags()

        assert created.tag == "A1"
        assert result.total == 2
        assert [t.tag for t in result.items] == ["1002", "A1"]

    def test_duplicate_raises(self, mock_create_session):
        create_tag("A1")
        with pytest.raises(ValueError, match="already exists"):
            create_tag("A1")

    def test_prefix(self, mock_create_session):
        for t in ["A1", "A2", "B1"]:
            create_tag(t)

        result = list_tags(prefix="A")

        assert {t.tag for t in result.items} == {"A1", "A2"}


class TestReaders:
    def test_create_and_list(self, mock_create_session):
        created = create_reader("dev1", name="Gate 1")
        create_reader("dev2")

        result = list_readers(limit=1)

        assert created.name == "Gate 1"
        assert result.total == 2
        assert [r.reader for r in result.items] == ["dev1"]

    def test_duplicate_raises(self, mock_create_session):
        create_reader("dev1")
        with pytest.raises(ValueError, match="already exists"):
            create_reader("dev1")


class TestAssets:
    def test_create_binds_to_tag(self, mock_create_session):
        tag = create_tag("A1")

        asset = create_asset("A1", name="Forklift")

        assert asset.tag_id == tag.id
        assert asset.name == "Forklift"
        assert asset.current_reader_id is None

    def test_unknown_tag(self, mock_create_session):
        with pytest.raises(ReferenceNotFound) as exc_info:
            create_asset("ZZZ")
        assert exc_info.value.kind == "tag"

    def test_one_asset_per_tag(self, mock_create_session):
        create_tag("A1")
        create_asset("A1")
        with pytest.raises(ValueError, match="already assigned"):
            create_asset("A1")

    def test_detail_follows_reads(self, mock_create_session):
        create_tag("A1")
        create_reader("dev1")
        asset = create_asset("A1")

        before = get_asset_detail(asset.id)
        create_event(tag="A1", reader="dev1")
        after = get_asset_detail(asset.id)

        assert before.tag == "A1"
        assert before.current_reader is None
        assert after.current_reader == "dev1"
        assert get_asset_detail("nonexistent") is None


class TestUniqueConstraintRaces:
    """The existence check can pass while a concurrent insert wins the unique index."""

    @pytest.mark.parametrize(
        "target,call",
        [
            ("insert_tag", lambda: create_tag("A1")),
            ("insert_reader", lambda: create_reader("dev1")),
        ],
        ids=["tag", "reader"],
    )
    def test_integrity_error_becomes_value_error(self, mock_create_session, target, call):
        fault = IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed"))

        with patch(f"rfid_tracker.services.registry.{target}", side_effect=fault):
            with pytest.raises(ValueError, match="already exists") as exc_info:
                call()

        assert exc_info.value.__cause__ is fault

    def test_asset_integrity_error_becomes_value_error(self, mock_create_session):
        create_tag("A1")
        fault = IntegrityError("INSERT INTO assets", {}, Exception("UNIQUE constraint failed: assets.tag_id"))

        with patch("rfid_tracker.services.registry.insert_asset", side_effect=fault):
            with pytest.raises(ValueError, match="already assigned"):
                create_asset("A1")

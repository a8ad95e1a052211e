import pytest
from sqlalchemy.orm import Session

from rfid_tracker.database.models import Asset, Reader, Tag
from rfid_tracker.database.queries import (
    asset_exists_for_tag_id,
    get_asset_by_id,
    get_asset_by_tag_id,
    get_reader_by_value,
    get_tag_by_value,
    insert_asset,
    insert_reader,
    insert_tag,
    list_readers_page,
    list_tags_page,
    reader_exists,
    set_asset_current_reader,
    tag_exists,
)


class TestTagLookups:
    @pytest.mark.parametrize(
        "stored,query,should_find",
        [
            (None, "A1", False),
            ("A1", "A1", True),
            ("A1", "a1", False),  # identifiers are case sensitive
            ("1001", "1001", True),
        ],
        ids=["nonexistent", "existing", "case_sensitive", "numeric_string"],
    )
    def test_get_by_value(self, session: Session, stored, query, should_find):
        if stored is not None:
            insert_tag(session, tag=stored)
            session.commit()

        result = get_tag_by_value(session, tag=query)
        assert (result is not None) is should_find
        assert tag_exists(session, tag=query) is should_find
        if should_find:
            assert result.tag == stored

    def test_list_tags_prefix_and_paging(self, session: Session):
        for t in ["A1", "A2", "A10", "B1", "A_x"]:
            insert_tag(session, tag=t)
        session.commit()

        rows, total = list_tags_page(session, prefix="A", limit=2, offset=0)
        assert total == 4
        assert [r.tag for r in rows] == ["A1", "A10"]

    def test_list_tags_prefix_escapes_wildcards(self, session: Session):
        for t in ["A_x", "Abx"]:
            insert_tag(session, tag=t)
        session.commit()

        rows, total = list_tags_page(session, prefix="A_")
        assert total == 1
        assert rows[0].tag == "A_x"


class TestReaderLookups:
    def test_get_by_value(self, session: Session):
        insert_reader(session, reader="dev1", name="Dock door")
        session.commit()

        reader = get_reader_by_value(session, reader="dev1")
        assert reader is not None
        assert reader.name == "Dock door"
        assert get_reader_by_value(session, reader="ghost") is None
        assert reader_exists(session, reader="dev1") is True
        assert reader_exists(session, reader="ghost") is False

    def test_list_readers_ordered(self, session: Session):
        for r in ["dev3", "dev1", "dev2"]:
            insert_reader(session, reader=r)
        session.commit()

        rows, total = list_readers_page(session, limit=10)
        assert total == 3
        assert [r.reader for r in rows] == ["dev1", "dev2", "dev3"]


class TestAssetLookups:
    def _make_tag(self, session: Session, value: str = "A1") -> Tag:
        return insert_tag(session, tag=value)

    def test_get_by_tag_id(self, session: Session):
        tag = self._make_tag(session)
        asset = insert_asset(session, tag_id=tag.id, name="Pallet 7")
        session.commit()

        found = get_asset_by_tag_id(session, tag_id=tag.id)
        assert found is not None
        assert found.id == asset.id
        assert found.current_reader_id is None
        assert asset_exists_for_tag_id(session, tag_id=tag.id) is True

    def test_get_by_tag_id_for_update(self, session: Session):
        tag = self._make_tag(session)
        asset = insert_asset(session, tag_id=tag.id)
        session.commit()

        found = get_asset_by_tag_id(session, tag_id=tag.id, for_update=True)
        assert found is not None
        assert found.id == asset.id

    def test_missing_asset_for_tag(self, session: Session):
        tag = self._make_tag(session)
        session.commit()

        assert get_asset_by_tag_id(session, tag_id=tag.id) is None
        assert asset_exists_for_tag_id(session, tag_id=tag.id) is False

    def test_set_current_reader_flushes(self, session: Session):
        tag = self._make_tag(session)
        asset = insert_asset(session, tag_id=tag.id)
        reader = insert_reader(session, reader="dev1")
        session.commit()
        before = asset.updated_at

        set_asset_current_reader(session, asset=asset, reader_id=reader.id)
        session.commit()

        session.expire_all()
        row = session.get(Asset, asset.id)
        assert row.current_reader_id == reader.id
        assert row.updated_at >= before

    def test_get_by_id_loads_tag_and_reader(self, session: Session):
        tag = self._make_tag(session, "T-9")
        asset = insert_asset(session, tag_id=tag.id)
        reader = insert_reader(session, reader="dev9")
        set_asset_current_reader(session, asset=asset, reader_id=reader.id)
        session.commit()

        row = get_asset_by_id(session, asset_id=asset.id)
        assert row.tag.tag == "T-9"
        assert isinstance(row.current_reader, Reader)
        assert row.current_reader.reader == "dev9"
        assert get_asset_by_id(session, asset_id="nonexistent") is None

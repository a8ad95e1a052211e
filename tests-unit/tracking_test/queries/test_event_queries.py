from datetime import timedelta

from sqlalchemy.orm import Session

from rfid_tracker.database.queries import (
    get_event_by_id,
    insert_event,
    list_events_page,
)


class TestInsertEvent:
    def test_insert_and_get(self, session: Session):
        event = insert_event(session, tag="A1", reader="dev1")
        session.commit()

        found = get_event_by_id(session, event_id=event.id)
        assert found is not None
        assert found.tag == "A1"
        assert found.reader == "dev1"
        assert found.asset_id is None
        assert found.created_at is not None

    def test_get_missing(self, session: Session):
        assert get_event_by_id(session, event_id="nonexistent") is None


class TestListEventsPage:
    def _seed(self, session: Session) -> None:
        events = [
            insert_event(session, tag="A1", reader="dev1"),
            insert_event(session, tag="A1", reader="dev2"),
            insert_event(session, tag="A2", reader="dev1"),
        ]
        base = events[0].created_at
        for i, e in enumerate(events):
            e.created_at = base + timedelta(seconds=i)
        session.commit()

    def test_newest_first(self, session: Session):
        self._seed(session)

        rows, total = list_events_page(session)
        assert total == 3
        assert [(r.tag, r.reader) for r in rows] == [
            ("A2", "dev1"),
            ("A1", "dev2"),
            ("A1", "dev1"),
        ]

    def test_filter_by_tag_and_reader(self, session: Session):
        self._seed(session)

        rows, total = list_events_page(session, tag="A1")
        assert total == 2
        assert {r.reader for r in rows} == {"dev1", "dev2"}

        rows, total = list_events_page(session, tag="A1", reader="dev1")
        assert total == 1
        assert rows[0].tag == "A1"

    def test_pagination_keeps_total(self, session: Session):
        self._seed(session)

        rows, total = list_events_page(session, limit=1, offset=1)
        assert total == 3
        assert len(rows) == 1
        assert rows[0].reader == "dev2"

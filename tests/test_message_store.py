from datetime import datetime, timedelta, timezone

import pytest

from app.models.submission import Submission, utc_now


def add_submission(store, **overrides):
    values = {
        "first_name": "Nimal",
        "last_name": "Perera",
        "email": "nimal@example.lk",
        "phone": "94771234567",
        "subject": "Quote",
        "message": "Hello",
    }
    values.update(overrides)
    with store.transaction() as session:
        return store.insert(session, **values)


def test_insert_returns_new_id(store):
    first = add_submission(store)
    second = add_submission(store)

    assert second > first
    assert store.count() == 2


def test_insert_stamps_created_at(store):
    add_submission(store)
    [record] = store.list_all()

    assert isinstance(record.created_at, datetime)
    assert record.first_name == "Nimal"
    assert record.phone == "94771234567"


def test_created_at_uses_utc_clock(store):
    before = utc_now()
    add_submission(store)
    after = utc_now()
    [record] = store.list_all()

    assert record.created_at.tzinfo is None
    assert before <= record.created_at <= after
    assert abs(datetime.now(timezone.utc).replace(tzinfo=None) - record.created_at) < timedelta(minutes=1)


def test_empty_subject_stored_as_null(store):
    add_submission(store, subject="")
    assert store.list_all()[0].subject is None


def test_transaction_rolls_back_on_error(store):
    with pytest.raises(RuntimeError):
        with store.transaction() as session:
            store.insert(
                session,
                first_name="A", last_name="B", email="a@b.co",
                phone="1", message="m",
            )
            raise RuntimeError("boom")

    assert store.count() == 0


def test_list_all_newest_first(store, database):
    ids = [add_submission(store, first_name=name) for name in ("one", "two", "three")]

    # Creation order deliberately differs from id order
    base = datetime(2025, 1, 1, 12, 0, 0)
    stamps = {ids[0]: base + timedelta(minutes=2), ids[1]: base, ids[2]: base + timedelta(minutes=1)}
    with database.transaction() as session:
        for submission_id, stamp in stamps.items():
            session.get(Submission, submission_id).created_at = stamp

    assert [record.id for record in store.list_all()] == [ids[0], ids[2], ids[1]]


def test_list_all_same_timestamp_falls_back_to_id(store):
    ids = [add_submission(store) for _ in range(3)]
    assert [record.id for record in store.list_all()] == list(reversed(ids))


def test_delete_existing(store):
    keep = add_submission(store)
    drop = add_submission(store)

    assert store.delete(drop) is True
    assert [record.id for record in store.list_all()] == [keep]


def test_delete_missing(store):
    add_submission(store)

    assert store.delete(9999) is False
    assert store.count() == 1

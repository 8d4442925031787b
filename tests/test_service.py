"""DemoService — delegation plus write / read-only transaction boundaries."""

import pytest
from sqlmodel import select

from msstudy.core.database_sync import read_only
from msstudy.core.exceptions import EntityNotFoundError
from msstudy.features.demo.models import Demo

from .conftest import DEFAULT_DEMOFIELD, UPDATED_DEMOFIELD


def _rows(session_factory):
    with session_factory() as session:
        return session.exec(select(Demo)).all()


def test_save_commits(service, demo, test_session_factory):
    saved = service.save(demo)

    rows = _rows(test_session_factory)
    assert [(r.id, r.demofield) for r in rows] == [(saved.id, DEFAULT_DEMOFIELD)]


def test_save_then_find_one_returns_last_saved_value(service, demo):
    saved = service.save(demo)
    service.save(Demo(id=saved.id, demofield=UPDATED_DEMOFIELD))

    found = service.find_one(saved.id)

    assert found is not None
    assert found.demofield == UPDATED_DEMOFIELD


def test_failed_write_is_rolled_back(service, repository, monkeypatch, test_session_factory):
    def failing_save(demo):
        repository.session.add(demo)
        repository.session.flush()
        raise RuntimeError("boom")

    monkeypatch.setattr(repository, "save", failing_save)

    with pytest.raises(RuntimeError):
        service.save(Demo(demofield="half-written"))

    assert _rows(test_session_factory) == []


def test_repository_errors_propagate_unchanged(service):
    with pytest.raises(EntityNotFoundError):
        service.save(Demo(id=404, demofield="x"))


def test_read_only_discards_writes(test_db, test_session_factory):
    with read_only(test_db):
        test_db.add(Demo(demofield="should vanish"))
        test_db.flush()

    assert _rows(test_session_factory) == []


def test_find_all_results_stay_readable(service, demo):
    service.save(demo)

    demos = service.find_all()

    assert [d.demofield for d in demos] == [DEFAULT_DEMOFIELD]


def test_find_one_absent_returns_none(service):
    assert service.find_one(1) is None


def test_delete_is_idempotent(service, demo, test_session_factory):
    saved = service.save(demo)

    service.delete(saved.id)
    service.delete(saved.id)

    assert _rows(test_session_factory) == []


def test_read_only_declares_read_only_on_postgresql(test_db, monkeypatch):
    executed = []
    monkeypatch.setattr(test_db.get_bind().dialect, "name", "postgresql")
    monkeypatch.setattr(test_db, "execute", lambda statement, *args, **kwargs: executed.append(str(statement)))

    with read_only(test_db):
        pass

    assert executed == ["SET TRANSACTION READ ONLY"]


def test_read_only_issues_nothing_on_sqlite(test_db, monkeypatch):
    executed = []
    monkeypatch.setattr(test_db, "execute", lambda statement, *args, **kwargs: executed.append(str(statement)))

    with read_only(test_db):
        pass

    assert executed == []

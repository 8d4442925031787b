"""Demo entity — identity is defined by id alone."""

from sqlalchemy.dialects import postgresql, sqlite

from msstudy.features.demo.models import CACHE_USAGE, Demo


def test_same_id_is_equal_regardless_of_field():
    demo1 = Demo(id=1, demofield="a")
    demo2 = Demo(id=1, demofield="b")
    assert demo1 == demo2


def test_different_ids_are_not_equal():
    assert Demo(id=1) != Demo(id=2)


def test_null_id_never_equals_another_instance():
    assert Demo() != Demo()
    assert Demo() != Demo(id=2)
    assert Demo(id=2) != Demo()


def test_instance_equals_itself_even_without_id():
    demo = Demo()
    assert demo == demo


def test_not_equal_to_other_types():
    assert Demo(id=1) != 1
    assert Demo(id=1) != {"id": 1}


def test_hash_is_stable_across_id_assignment():
    demo = Demo(demofield="x")
    before = hash(demo)
    demo.id = 42
    assert hash(demo) == before


def test_demofield_accepts_any_string():
    assert Demo(demofield="").demofield == ""
    assert Demo(demofield=None).demofield is None


def test_table_declares_cache_hint():
    assert Demo.__table__.name == "demo"
    assert Demo.__table__.info["cache_usage"] == CACHE_USAGE


def test_str_shows_id_and_field():
    assert str(Demo(id=3, demofield="x")) == "Demo{id=3, demofield='x'}"


def test_id_column_is_64_bit():
    id_type = Demo.__table__.c.id.type
    assert id_type.compile(dialect=postgresql.dialect()) == "BIGINT"
    # SQLite keeps INTEGER so the column stays the rowid alias
    assert id_type.compile(dialect=sqlite.dialect()) == "INTEGER"
    assert Demo.__table__.dialect_options["sqlite"]["autoincrement"] is True

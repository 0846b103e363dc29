import pytest

from reltab.dialects import (
    SQLDialect,
    available_dialects,
    get_dialect,
    get_duckdb_dialect,
    get_postgres_dialect,
    get_sqlite_dialect,
)


def test_available_dialects_are_fixed():
    assert available_dialects() == ["duckdb", "postgres", "sqlite"]


def test_get_dialect_returns_singletons():
    assert get_dialect("duckdb") is get_duckdb_dialect()
    assert get_dialect("SQLite") is get_sqlite_dialect()
    assert get_dialect("postgres") is get_postgres_dialect()


def test_registered_dialects_satisfy_capability_interface():
    for name in available_dialects():
        dialect = get_dialect(name)
        assert isinstance(dialect, SQLDialect)
        assert dialect.dialect_name == name


def test_unknown_dialect_lists_available_names():
    with pytest.raises(KeyError) as excinfo:
        get_dialect("oracle")
    assert "duckdb, postgres, sqlite" in str(excinfo.value)


def test_package_root_exposes_every_dialect_accessor():
    import reltab

    assert reltab.get_duckdb_dialect() is get_duckdb_dialect()
    assert reltab.get_sqlite_dialect() is get_sqlite_dialect()
    assert reltab.get_postgres_dialect() is get_postgres_dialect()
    for name in ("get_duckdb_dialect", "get_sqlite_dialect", "get_postgres_dialect"):
        assert name in reltab.__all__

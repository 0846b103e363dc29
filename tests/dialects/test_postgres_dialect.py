from reltab.core import ColumnKind
from reltab.dialects import get_postgres_dialect


def test_postgres_dialect_quotes_identifiers():
    dialect = get_postgres_dialect()
    assert dialect.quote_col('table"name') == '"table""name"'
    assert dialect.require_subquery_alias is True


def test_postgres_core_types_cover_every_kind():
    dialect = get_postgres_dialect()
    assert set(dialect.core_column_types) == set(ColumnKind)
    reachable = list(dialect.column_types.values())
    for column_type in dialect.core_column_types.values():
        assert any(column_type is candidate for candidate in reachable)


def test_postgres_format_type_names():
    dialect = get_postgres_dialect()
    assert dialect.column_type("character varying(40)").kind is ColumnKind.STRING
    assert dialect.column_type("numeric(10,2)").kind is ColumnKind.REAL
    assert dialect.column_types["timestamp without time zone"] is dialect.column_types["timestamp with time zone"]
    assert dialect.column_types["bytea"].render(b"\x68\x69") == "hi"


def test_postgres_type_modifier_inside_temporal_names():
    dialect = get_postgres_dialect()
    timestamp = dialect.column_types["timestamp without time zone"]
    assert dialect.column_type("timestamp(3) without time zone") is timestamp
    assert dialect.column_type("timestamp(6) with time zone") is timestamp
    assert dialect.column_type("time(0) with time zone").kind is ColumnKind.STRING

from reltab.core import ColumnKind
from reltab.dialects import get_sqlite_dialect


def test_sqlite_identifier_quoting():
    dialect = get_sqlite_dialect()
    assert dialect.quote_col("table") == '"table"'
    assert dialect.quote_col('bad"name') == '"bad""name"'


def test_sqlite_does_not_require_subquery_alias():
    assert get_sqlite_dialect().require_subquery_alias is False


def test_sqlite_declared_type_aliases():
    types = get_sqlite_dialect().column_types
    assert types["INTEGER"] is types["INT"] is types["BIGINT"]
    assert types["DATETIME"] is types["TIMESTAMP"]
    assert types["NUMERIC"].kind is ColumnKind.REAL


def test_sqlite_parameterized_varchar():
    dialect = get_sqlite_dialect()
    assert dialect.column_type("VARCHAR(255)") is dialect.core_column_types[ColumnKind.STRING]

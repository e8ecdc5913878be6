# -*- coding: utf-8 -*-
"""
Runtime side of the entry points and interpolation labels.

The checks happen before the program runs (``sqlite-validator`` over the
source); at runtime the entry points hand the query back unchanged::

    name = "my_table"
    query = sql_query(f"SELECT * FROM {table(name)}")

    sub = sql_query("SELECT my_column FROM my_other_table")
    query = sql_query(f"SELECT * FROM my_table WHERE my_column = ({subquery(sub)})")

    sql_query_unsafe("DROP TABLE my_table")  # no destructive-statement warning
"""

from typing import Any


def sql_query(query: str) -> str:
    """A SQLite query, checked for syntax and destructive statements."""
    return query


def sql_query_unsafe(query: str) -> str:
    """Same as :func:`sql_query` with the destructive-statement warning muted."""
    return query


def table(value: Any) -> str:
    """Label an interpolated table name."""
    return str(value)


def column(value: Any) -> str:
    """Label an interpolated column name."""
    return str(value)


def subquery(value: Any) -> str:
    """Label an interpolated subquery; keep its parentheses in the literal."""
    return str(value)

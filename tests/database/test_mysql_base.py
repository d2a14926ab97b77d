import logging

import mysql.connector
import pytest

from staff_management.core.exceptions import StorageError
from staff_management.database.mysql_base import db_cursor


def test_successful_block_commits_and_closes(make_conn_factory):
    factory = make_conn_factory(rows=[{"n": 1}])

    with db_cursor(factory, entity="employee", operation="count_by_shift", ref=1) as (_, cur):
        cur.execute("SELECT 1")

    assert factory.conn.committed
    assert not factory.conn.rolled_back
    assert factory.cursor.closed and factory.conn.closed


def test_driver_error_becomes_storage_error(make_conn_factory, caplog):
    factory = make_conn_factory(error=mysql.connector.Error("Lost connection to MySQL server"))

    with caplog.at_level(logging.ERROR), pytest.raises(StorageError) as exc_info:
        with db_cursor(factory, entity="employee", operation="update", ref=42) as (_, cur):
            cur.execute("UPDATE employees SET name=%s WHERE employee_id=%s", ("A", 42))

    assert str(exc_info.value) == "operation failed"
    assert "Lost connection" not in str(exc_info.value)
    assert factory.conn.rolled_back
    assert not factory.conn.committed
    assert factory.conn.closed
    assert "entity=employee operation=update ref=42" in caplog.text


def test_connect_failure_becomes_storage_error(make_conn_factory, caplog):
    factory = make_conn_factory(connect_error=mysql.connector.Error("Can't connect"))

    with caplog.at_level(logging.ERROR), pytest.raises(StorageError):
        with db_cursor(factory, entity="shift", operation="list_all"):
            pass

    assert "entity=shift operation=list_all" in caplog.text


def test_other_errors_roll_back_and_propagate(make_conn_factory):
    factory = make_conn_factory()

    with pytest.raises(KeyError):
        with db_cursor(factory, entity="shift", operation="get_by_id", ref=1):
            raise KeyError("shift_id")

    assert factory.conn.rolled_back
    assert factory.conn.closed

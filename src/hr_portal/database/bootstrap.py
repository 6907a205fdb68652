from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

import mysql.connector

from ..core.exceptions import PersistenceError
from .connection import DBConfig, DatabaseConnection
from .mysql_base import db_cursor

logger = logging.getLogger(__name__)

SQL_DIR = Path(__file__).resolve().parent
SCHEMA_PATH = SQL_DIR / "schema.sql"
SEED_PATH = SQL_DIR / "seed.sql"


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _strip_comments(sql: str) -> str:
    return re.sub(r"(?m)^\s*--.*$", "", sql)


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema/seed files (handles ';' inside quotes).
    buf: list[str] = []
    in_single = False
    in_double = False
    escape = False

    for ch in sql:
        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\":
            buf.append(ch)
            escape = True
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
            buf.append(ch)
            continue

        if ch == '"' and not in_single:
            in_double = not in_double
            buf.append(ch)
            continue

        if ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def read_sql_file(path: str | Path) -> list[str]:
    sql = Path(path).read_text(encoding="utf-8")
    return list(_iter_sql_statements(_strip_comments(_strip_create_db_and_use(sql))))


def _run_file(conn: DatabaseConnection, path: str | Path) -> int:
    statements = read_sql_file(path)
    with db_cursor(conn, dictionary=False) as (_, cur):
        for stmt in statements:
            cur.execute(stmt)
    return len(statements)


def ensure_database_exists(config: DBConfig) -> None:
    # No database selected yet, so this cannot go through db_cursor.
    try:
        conn = DatabaseConnection(config).connect(with_database=False)
    except mysql.connector.Error as e:
        raise PersistenceError(str(e)) from e
    try:
        cur = conn.cursor()
        try:
            cur.execute(
                f"CREATE DATABASE IF NOT EXISTS `{config.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
            )
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as e:
        raise PersistenceError(str(e)) from e
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path = SCHEMA_PATH) -> None:
    config = DBConfig.from_dict(db_config)
    ensure_database_exists(config)
    count = _run_file(DatabaseConnection(config), schema_path)
    logger.info("applied %s (%d statements) to %s", Path(schema_path).name, count, config.database)


def apply_seed_sql(db_config: dict, *, seed_path: str | Path = SEED_PATH) -> None:
    config = DBConfig.from_dict(db_config)
    count = _run_file(DatabaseConnection(config), seed_path)
    logger.info("applied %s (%d statements) to %s", Path(seed_path).name, count, config.database)


def list_tables(db_config: dict) -> list[str]:
    config = DBConfig.from_dict(db_config)
    with db_cursor(DatabaseConnection(config), dictionary=False) as (_, cur):
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]

"""SQLite schema for the catalogs."""
import sqlite3

from catalog.domain.shared.measure_type import MeasureType

CATALOG_TABLES = ("items", "products")


def initialize_schema(conn: sqlite3.Connection, enable_wal: bool = True) -> None:
    """
    Create the lookup and catalog tables if they do not exist.

    ``measure_types`` is seeded with the fixed measure type members. Each
    catalog table carries a unique index over (normalized_name,
    measure_type_id) so concurrent creates cannot both insert the same entry.
    """
    if enable_wal:
        conn.execute("PRAGMA journal_mode=WAL")
    conn.execute("PRAGMA foreign_keys = ON")

    conn.execute("""
        CREATE TABLE IF NOT EXISTS measure_types (
            id INTEGER PRIMARY KEY,
            name TEXT NOT NULL UNIQUE
        )
    """)
    conn.executemany(
        "INSERT OR IGNORE INTO measure_types (id, name) VALUES (?, ?)",
        [(member.id, member.name) for member in MeasureType.list()],
    )

    for table in CATALOG_TABLES:
        conn.execute(f"""
            CREATE TABLE IF NOT EXISTS {table} (
                id TEXT PRIMARY KEY,
                name TEXT NOT NULL,
                normalized_name TEXT NOT NULL,
                measure_type_id INTEGER NOT NULL REFERENCES measure_types(id),
                is_archive INTEGER NOT NULL DEFAULT 0
            )
        """)
        conn.execute(f"""
            CREATE UNIQUE INDEX IF NOT EXISTS ux_{table}_name_measure_type
            ON {table}(normalized_name, measure_type_id)
        """)
        conn.execute(f"""
            CREATE INDEX IF NOT EXISTS idx_{table}_is_archive
            ON {table}(is_archive)
        """)

    conn.commit()

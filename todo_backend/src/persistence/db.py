from __future__ import annotations

import os
import sqlite3


# PUBLIC_INTERFACE
def connect(db_path: str, foreign_keys: bool = True) -> sqlite3.Connection:
    """
    Open a sqlite connection configured for the persistence gateway.

    - rows come back as sqlite3.Row mappings keyed by column name
    - autocommit (isolation_level=None): every statement commits on its own,
      no implicit transaction spans gateway calls
    - foreign keys are enforced when requested, so todos must reference an
      existing list
    """
    if db_path != ":memory:":
        os.makedirs(os.path.dirname(db_path) or ".", exist_ok=True)
    conn = sqlite3.connect(
        db_path,
        detect_types=sqlite3.PARSE_DECLTYPES | sqlite3.PARSE_COLNAMES,
        isolation_level=None,
    )
    conn.row_factory = sqlite3.Row
    if foreign_keys:
        conn.execute("PRAGMA foreign_keys = ON")
    return conn

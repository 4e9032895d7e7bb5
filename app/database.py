# app/database.py
"""
File-backed document store. Every table is a CSV file inside DATA_DIR and
every cell is kept as a string; nested documents (e.g. cart items) are stored
as JSON in a single cell by the models that own them.

Writes take a per-file lock so one record write never interleaves with
another writer of the same table.

Usage:
    from app.database import db
    db.get_record("carts", "email", "jane@example.com")
    db.create_record("products", {"name": "ball", "cost": 20})
    db.update_record("users", "id", user_id, {"wallet_money": 60.0})
"""

import logging
import uuid
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd
from filelock import FileLock

from app.config import settings

logger = logging.getLogger(__name__)


class FileBackedDB:
    """
    Manages the CSV tables inside `data_dir`. A table name resolves to a file
    through the settings mapping, falling back to `<table>.csv`.
    """

    def __init__(self, data_dir: Path = settings.DATA_DIR):
        self.data_dir = Path(data_dir)

    def _file_path(self, table: str) -> Path:
        mapping = {
            "users": settings.USERS_FILE,
            "products": settings.PRODUCTS_FILE,
            "carts": settings.CARTS_FILE,
        }
        filename = mapping.get(table, f"{table}.csv")
        return Path(self.data_dir) / filename

    def _lock_for(self, path: Path) -> FileLock:
        return FileLock(str(path) + ".lock")

    def _read_df(self, table: str) -> pd.DataFrame:
        path = self._file_path(table)
        if not path.exists():
            return pd.DataFrame()
        try:
            return pd.read_csv(path, dtype=str, keep_default_na=False)
        except pd.errors.EmptyDataError:
            return pd.DataFrame()

    def _write_df_nolock(self, table: str, df: pd.DataFrame) -> None:
        """
        Write `df` as the whole table WITHOUT acquiring the file lock.
        Only call this while holding the lock for the table.
        """
        path = self._file_path(table)
        path.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(path, index=False)
        logger.debug("Wrote %d rows to %s", len(df), path)

    @staticmethod
    def _row_to_dict(row: pd.Series) -> Dict[str, Any]:
        return {k: (None if pd.isna(v) else v) for k, v in row.to_dict().items()}

    # --- high-level CRUD primitives ---

    def list_records(self, table: str) -> List[Dict[str, Any]]:
        df = self._read_df(table)
        if df.empty:
            return []
        return [self._row_to_dict(row) for _, row in df.iterrows()]

    def get_record(self, table: str, key: str, value: Any) -> Optional[Dict[str, Any]]:
        df = self._read_df(table)
        if df.empty or key not in df.columns:
            return None
        # every cell is a string, so compare as strings
        mask = df[key] == str(value)
        if not mask.any():
            return None
        return self._row_to_dict(df[mask].iloc[0])

    def create_record(
        self, table: str, data: Dict[str, Any], id_field: str = "id", unique_key: Optional[str] = None
    ) -> Optional[Dict[str, Any]]:
        """
        Append a record. If `id_field` is missing or empty a uuid4 hex id is
        generated. Returns the stored record (with id).

        With `unique_key`, returns None instead of appending when a row with
        the same value for that column already exists. The check runs under
        the table lock.
        """
        record = dict(data)
        if not record.get(id_field):
            record[id_field] = uuid.uuid4().hex
        new_row = {k: ("" if v is None else str(v)) for k, v in record.items()}

        path = self._file_path(table)
        path.parent.mkdir(parents=True, exist_ok=True)
        with self._lock_for(path):
            df = self._read_df(table)
            if unique_key and not df.empty and unique_key in df.columns:
                if (df[unique_key] == new_row.get(unique_key, "")).any():
                    logger.debug("Refused duplicate %s record %s=%s", table, unique_key, new_row.get(unique_key))
                    return None
            row_df = pd.DataFrame([new_row], dtype=str)
            if df.empty:
                df = row_df
            else:
                df = pd.concat([df, row_df], ignore_index=True, sort=False)
            self._write_df_nolock(table, df.fillna(""))
        logger.debug("Created %s record %s", table, record[id_field])
        return new_row

    def update_record(self, table: str, key: str, value: Any, updates: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Update the rows where `key` equals `value`. Returns the first updated
        row, or None when nothing matched.
        """
        path = self._file_path(table)
        path.parent.mkdir(parents=True, exist_ok=True)
        with self._lock_for(path):
            df = self._read_df(table)
            if df.empty or key not in df.columns:
                return None
            mask = df[key] == str(value)
            if not mask.any():
                return None
            for k, v in updates.items():
                if k not in df.columns:
                    df[k] = ""
                df.loc[mask, k] = "" if v is None else str(v)
            self._write_df_nolock(table, df)
            row = self._row_to_dict(df[mask].iloc[0])
        logger.debug("Updated %s record %s=%s (%s)", table, key, value, ", ".join(updates))
        return row


# module-level singleton for convenience
db = FileBackedDB()

"""SQLite cache holding the last ingested schema for lookup tools."""

import json
from datetime import datetime
from pathlib import Path
from typing import Optional

from sqlalchemy import Column, DateTime, String, Text, create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from ..config import SQLITE_PATH

Base = declarative_base()


class TableModel(Base):
    """Parsed table."""
    __tablename__ = "tables"

    id = Column(String(256), primary_key=True)  # lower-cased table name
    table_name = Column(String(256))
    comment = Column(Text)
    columns_json = Column(Text)  # JSON list of Column.to_dict()
    primary_key_json = Column(Text)  # JSON list of PK columns
    last_synced = Column(DateTime)

    @property
    def columns(self) -> list[dict]:
        return json.loads(self.columns_json) if self.columns_json else []

    @columns.setter
    def columns(self, value: list[dict]):
        self.columns_json = json.dumps(value, ensure_ascii=False)

    @property
    def primary_key(self) -> list[str]:
        return json.loads(self.primary_key_json) if self.primary_key_json else []

    @primary_key.setter
    def primary_key(self, value: list[str]):
        self.primary_key_json = json.dumps(value, ensure_ascii=False)


class EnumModel(Base):
    """Enum values declared in a column comment."""
    __tablename__ = "enums"

    id = Column(String(512), primary_key=True)  # table.column, lower-cased
    table_name = Column(String(256), index=True)
    column_name = Column(String(256))
    values_json = Column(Text)  # JSON list of {value, label}
    source = Column(String(50))
    last_synced = Column(DateTime)

    @property
    def values(self) -> list[dict]:
        return json.loads(self.values_json) if self.values_json else []

    @values.setter
    def values(self, value: list[dict]):
        self.values_json = json.dumps(value, ensure_ascii=False)


class SyncMetadataModel(Base):
    """Track sync metadata."""
    __tablename__ = "sync_metadata"

    key = Column(String(64), primary_key=True)
    value = Column(Text)
    updated_at = Column(DateTime)


def _table_id(table_name: str) -> str:
    return table_name.lower()


def _enum_id(table_name: str, column_name: str) -> str:
    return f"{table_name}.{column_name}".lower()


class SQLiteCache:
    """Structured schema cache using SQLite."""

    def __init__(self, path: Optional[str] = None):
        """Initialize SQLite database.

        Args:
            path: Override path for SQLite file. Uses default if None.
        """
        db_path = Path(path) if path else SQLITE_PATH
        db_path.parent.mkdir(parents=True, exist_ok=True)

        self.engine = create_engine(f"sqlite:///{db_path}", echo=False)
        Base.metadata.create_all(self.engine)
        self.SessionLocal = sessionmaker(bind=self.engine)

    def _get_session(self) -> Session:
        return self.SessionLocal()

    # ========== Table Operations ==========

    def upsert_table(self, data: dict, synced_at: datetime) -> None:
        """Insert or update a table record.

        Args:
            data: Table.to_dict() output.
            synced_at: Timestamp recorded for this write.
        """
        with self._get_session() as session:
            table = session.get(TableModel, _table_id(data["table_name"]))
            if table is None:
                table = TableModel(id=_table_id(data["table_name"]))
                session.add(table)

            table.table_name = data["table_name"]
            table.comment = data.get("comment")
            table.columns = data.get("columns", [])
            table.primary_key = data.get("primary_key", [])
            table.last_synced = synced_at
            session.commit()

    def get_table(self, table_name: str) -> Optional[dict]:
        """Get table metadata by name.

        Args:
            table_name: Table name (case-insensitive).

        Returns:
            Dictionary with table metadata, or None if not found.
        """
        with self._get_session() as session:
            table = session.get(TableModel, _table_id(table_name))
            if table:
                return {
                    "table_name": table.table_name,
                    "comment": table.comment,
                    "columns": table.columns,
                    "primary_key": table.primary_key,
                }
            return None

    def get_all_tables(self) -> list[dict]:
        """Get all table names."""
        with self._get_session() as session:
            tables = session.query(TableModel).order_by(TableModel.id).all()
            return [
                {
                    "table_name": t.table_name,
                    "comment": t.comment,
                    "column_count": len(t.columns),
                }
                for t in tables
            ]

    def search_columns(
        self,
        query: str,
        data_type: Optional[str] = None,
        limit: int = 20,
    ) -> list[dict]:
        """Find columns whose name or comment contains `query`.

        Args:
            query: Case-insensitive substring.
            data_type: Optional normalized type name filter (e.g. VARCHAR).
            limit: Maximum number of matches.

        Returns:
            List of {table_name, column_name, data_type, comment}.
        """
        needle = query.lower()
        results = []
        with self._get_session() as session:
            for table in session.query(TableModel).order_by(TableModel.id):
                for col in table.columns:
                    if data_type and col["type"]["name"] != data_type.upper():
                        continue
                    if needle in col["name"].lower() or needle in (col.get("comment") or "").lower():
                        results.append({
                            "table_name": table.table_name,
                            "column_name": col["name"],
                            "data_type": col["type"]["original_type"],
                            "comment": col.get("comment") or "",
                        })
                        if len(results) >= limit:
                            return results
        return results

    # ========== Enum Operations ==========

    def upsert_enum(self, data: dict, synced_at: datetime) -> None:
        """Insert or update enum values for a column.

        Args:
            data: Dictionary with table_name, column_name, values, source.
            synced_at: Timestamp recorded for this write.
        """
        with self._get_session() as session:
            enum_id = _enum_id(data["table_name"], data["column_name"])
            enum = session.get(EnumModel, enum_id)
            if enum is None:
                enum = EnumModel(id=enum_id)
                session.add(enum)

            enum.table_name = data["table_name"]
            enum.column_name = data["column_name"]
            enum.values = data.get("values", [])
            enum.source = data.get("source", "comment")
            enum.last_synced = synced_at
            session.commit()

    def get_enum(self, table_name: str, column_name: str) -> Optional[dict]:
        """Get enum values for a specific column.

        Args:
            table_name: Table name (case-insensitive).
            column_name: Column name (case-insensitive).

        Returns:
            Dictionary with enum values, or None if not found.
        """
        with self._get_session() as session:
            enum = session.get(EnumModel, _enum_id(table_name, column_name))
            if enum:
                return {
                    "table_name": enum.table_name,
                    "column_name": enum.column_name,
                    "values": enum.values,
                    "source": enum.source,
                }
            return None

    # ========== Sync Metadata Operations ==========

    def get_last_sync_time(self) -> Optional[datetime]:
        """Get the timestamp of the last successful sync."""
        with self._get_session() as session:
            meta = session.get(SyncMetadataModel, "last_sync_time")
            if meta:
                return datetime.fromisoformat(meta.value)
            return None

    def update_last_sync_time(self, synced_at: datetime) -> None:
        """Record `synced_at` as the last sync timestamp."""
        with self._get_session() as session:
            meta = session.get(SyncMetadataModel, "last_sync_time")
            if meta is None:
                meta = SyncMetadataModel(key="last_sync_time")
                session.add(meta)
            meta.value = synced_at.isoformat()
            meta.updated_at = synced_at
            session.commit()

    def clear_all(self) -> None:
        """Delete all cached data."""
        with self._get_session() as session:
            session.query(TableModel).delete()
            session.query(EnumModel).delete()
            session.query(SyncMetadataModel).delete()
            session.commit()

    def get_stats(self) -> dict:
        """Get statistics about cached data."""
        with self._get_session() as session:
            return {
                "tables": session.query(TableModel).count(),
                "enums": session.query(EnumModel).count(),
                "last_sync": self.get_last_sync_time(),
            }

"""
Record Repository - Read-only access to exercises and training history.

The engine never writes. Rows coming back from the store are loosely typed
(Firestore documents, fixture dicts, legacy exports with ISO strings), so
every row is passed through a mapping function that validates it and builds
the typed entity from models.py. Nothing past this module sees raw rows.

Collections:
- exercises/{exerciseId}: Catalog reference data
- workout_sessions/{sessionId}: Completed and in-progress sessions (user_id)
- personal_records/{recordId}: Per-exercise bests (user_id)
- muscle_volume/{docId}: Rolling per-muscle volume (user_id)
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, TypeVar

from workout_engine.config import (
    EXERCISES_COLLECTION,
    MUSCLE_VOLUME_COLLECTION,
    PERSONAL_RECORDS_COLLECTION,
    SESSIONS_COLLECTION,
)
from workout_engine.models import Exercise, MuscleVolume, PersonalRecord, SessionRecord

logger = logging.getLogger(__name__)

T = TypeVar("T")

# (field, op, value); op is "==" or "array_contains"
QueryFilter = Tuple[str, str, Any]


class RecordMappingError(ValueError):
    """Raised when a repository row cannot be mapped to a domain entity."""

    def __init__(self, entity: str, reason: str, row_id: Optional[str] = None):
        super().__init__(f"Cannot map {entity} row {row_id or '?'}: {reason}")
        self.entity = entity
        self.reason = reason
        self.row_id = row_id


# =============================================================================
# ROW MAPPING
# =============================================================================

def parse_timestamp(value: Any) -> Optional[datetime]:
    """Convert a stored timestamp (datetime, date or ISO string) to datetime."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text)
        except ValueError as e:
            raise ValueError(f"unparseable timestamp {value!r}") from e
    raise ValueError(f"unsupported timestamp type {type(value).__name__}")


def _tags(value: Any) -> frozenset:
    if value is None:
        return frozenset()
    if isinstance(value, str):
        return frozenset([value]) if value else frozenset()
    return frozenset(str(v) for v in value if v)


def _number(value: Any, default: float = 0.0) -> float:
    if value is None:
        return default
    if isinstance(value, bool):
        raise ValueError("boolean is not a number")
    return float(value)


def exercise_from_row(row: Dict[str, Any]) -> Exercise:
    """Map a catalog row to an Exercise."""
    row_id = row.get("id")
    if not row_id:
        raise RecordMappingError("exercise", "missing id")
    name = row.get("name")
    if not name:
        raise RecordMappingError("exercise", "missing name", row_id)

    difficulty = row.get("difficulty") or None
    if difficulty is not None:
        difficulty = str(difficulty).lower()

    return Exercise(
        id=str(row_id),
        name=str(name),
        slug=row.get("slug") or "",
        primary_muscles=_tags(row.get("primary_muscles")),
        secondary_muscles=_tags(row.get("secondary_muscles")),
        equipment_required=_tags(row.get("equipment_required")),
        difficulty=difficulty,
        is_compound=bool(row.get("is_compound", False)),
        movement_pattern=row.get("movement_pattern") or None,
    )


def session_from_row(row: Dict[str, Any]) -> SessionRecord:
    """Map a session row to a SessionRecord."""
    row_id = row.get("session_id") or row.get("id")
    if not row_id:
        raise RecordMappingError("session", "missing session_id")
    try:
        return SessionRecord(
            session_id=str(row_id),
            completed_at=parse_timestamp(row.get("completed_at")),
            total_volume=_number(row.get("total_volume")),
            exercise_count=int(_number(row.get("exercise_count"))),
            started_at=parse_timestamp(row.get("started_at")),
            name=row.get("session_name") or row.get("name"),
        )
    except (TypeError, ValueError) as e:
        raise RecordMappingError("session", str(e), str(row_id)) from e


def personal_record_from_row(row: Dict[str, Any]) -> PersonalRecord:
    """Map a personal-record row to a PersonalRecord."""
    name = row.get("exercise_name")
    if not name:
        raise RecordMappingError("personal_record", "missing exercise_name", row.get("id"))
    try:
        pr_reps = row.get("pr_reps")
        return PersonalRecord(
            exercise_name=str(name),
            estimated_1rm=_number(row.get("estimated_1rm")),
            exercise_id=row.get("exercise_id"),
            achieved_at=parse_timestamp(row.get("achieved_at")),
            pr_weight=_number(row["pr_weight"]) if row.get("pr_weight") is not None else None,
            pr_reps=int(pr_reps) if pr_reps is not None else None,
        )
    except (TypeError, ValueError) as e:
        raise RecordMappingError("personal_record", str(e), row.get("id")) from e


def muscle_volume_from_row(row: Dict[str, Any]) -> MuscleVolume:
    """Map a muscle-volume row to a MuscleVolume."""
    muscle = row.get("muscle")
    if not muscle:
        raise RecordMappingError("muscle_volume", "missing muscle", row.get("id"))
    try:
        last_trained = parse_timestamp(row.get("last_trained"))
        if last_trained is None:
            raise ValueError("missing last_trained")
        return MuscleVolume(
            muscle=str(muscle),
            total_volume=_number(row.get("total_volume")),
            last_trained=last_trained,
            training_days=int(_number(row.get("training_days"))),
        )
    except (TypeError, ValueError) as e:
        raise RecordMappingError("muscle_volume", str(e), row.get("id")) from e


def map_rows(rows: Iterable[Dict[str, Any]], mapper: Callable[[Dict[str, Any]], T]) -> List[T]:
    """Map rows, logging and skipping the ones that fail validation."""
    mapped = []
    skipped = 0
    for row in rows:
        try:
            mapped.append(mapper(row))
        except RecordMappingError as e:
            skipped += 1
            logger.warning("Skipping row: %s", e)
    if skipped:
        logger.info("Mapped %d rows, skipped %d", len(mapped), skipped)
    return mapped


# =============================================================================
# REPOSITORY
# =============================================================================

class RecordRepository(ABC):
    """
    Generic read interface over the record store.

    Implementations:
    - FirestoreRecordRepository: Production Firestore
    - InMemoryRecordRepository: Tests and fixture files
    """

    @abstractmethod
    def query(
        self,
        collection: str,
        filters: Optional[List[QueryFilter]] = None,
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """
        Select rows from a collection.

        Args:
            collection: Collection name
            filters: (field, op, value) tuples, op is "==" or "array_contains"
            order_by: Field to order by
            descending: Reverse the ordering
            limit: Maximum number of rows

        Returns:
            Row dicts, each including its document id under "id"
        """
        pass

    def load_exercises(self) -> List[Exercise]:
        """Load the full exercise catalog."""
        return map_rows(self.query(EXERCISES_COLLECTION), exercise_from_row)

    def load_sessions(self, user_id: str, limit: Optional[int] = None) -> List[SessionRecord]:
        """Load a user's sessions, most recently completed first."""
        rows = self.query(
            SESSIONS_COLLECTION,
            filters=[("user_id", "==", user_id)],
            order_by="completed_at",
            descending=True,
            limit=limit,
        )
        return map_rows(rows, session_from_row)

    def load_personal_records(self, user_id: str) -> List[PersonalRecord]:
        rows = self.query(PERSONAL_RECORDS_COLLECTION, filters=[("user_id", "==", user_id)])
        return map_rows(rows, personal_record_from_row)

    def load_muscle_volume(self, user_id: str) -> List[MuscleVolume]:
        rows = self.query(MUSCLE_VOLUME_COLLECTION, filters=[("user_id", "==", user_id)])
        return map_rows(rows, muscle_volume_from_row)


class FirestoreRecordRepository(RecordRepository):
    """Record repository backed by a Firestore client supplied by the caller."""

    def __init__(self, client):
        self.client = client

    def query(
        self,
        collection: str,
        filters: Optional[List[QueryFilter]] = None,
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        from google.cloud import firestore
        from google.cloud.firestore_v1 import FieldFilter

        query = self.client.collection(collection)
        for field_name, op, value in filters or []:
            query = query.where(filter=FieldFilter(field_name, op, value))
        if order_by:
            direction = firestore.Query.DESCENDING if descending else firestore.Query.ASCENDING
            query = query.order_by(order_by, direction=direction)
        if limit:
            query = query.limit(limit)

        rows = []
        for doc in query.stream():
            data = doc.to_dict() or {}
            data.setdefault("id", doc.id)
            rows.append(data)
        logger.debug("Firestore query %s returned %d rows", collection, len(rows))
        return rows


class InMemoryRecordRepository(RecordRepository):
    """Record repository over plain dicts, for tests and fixture files."""

    def __init__(self, collections: Optional[Dict[str, List[Dict[str, Any]]]] = None):
        self.collections: Dict[str, List[Dict[str, Any]]] = {
            name: [dict(row) for row in rows] for name, rows in (collections or {}).items()
        }
        self.query_count = 0

    def query(
        self,
        collection: str,
        filters: Optional[List[QueryFilter]] = None,
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        self.query_count += 1
        rows = [dict(row) for row in self.collections.get(collection, [])]

        for field_name, op, value in filters or []:
            if op == "==":
                rows = [r for r in rows if r.get(field_name) == value]
            elif op == "array_contains":
                rows = [r for r in rows if value in (r.get(field_name) or [])]
            else:
                raise ValueError(f"Unsupported filter operator: {op}")

        if order_by:
            # Rows missing the field sort last in either direction
            present = [r for r in rows if r.get(order_by) is not None]
            missing = [r for r in rows if r.get(order_by) is None]
            present.sort(key=lambda r: _sort_key(r[order_by]), reverse=descending)
            rows = present + missing

        if limit:
            rows = rows[:limit]
        return rows


def _sort_key(value: Any) -> Any:
    if isinstance(value, str):
        try:
            parsed = parse_timestamp(value)
        except ValueError:
            return value
        return parsed.isoformat() if parsed else value
    if isinstance(value, datetime):
        return value.isoformat()
    return value

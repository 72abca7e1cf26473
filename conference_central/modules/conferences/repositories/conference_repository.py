"""
Conference Repository

Handles all database operations for conferences and conference id
allocation.
"""
import logging
import json
from datetime import date
from typing import Optional, Dict, Any, List
from databases import Database
from conference_central.modules.database import database, is_postgres
from conference_central.modules.conferences.domain.profile import ProfileKey
from conference_central.modules.conferences.domain.conference import ConferenceKey
from conference_central.modules.conferences.repositories.profile_repository import (
    parse_jsonb,
    row_to_dict,
)

logger = logging.getLogger("conference_central.conferences.repository")

CONFERENCE_COLUMNS = """
    id, organizer_user_id, name, description, topics, city,
    start_date, month, end_date, max_attendees, seats_available
"""


def _iso(value: Optional[date]) -> Optional[str]:
    return value.isoformat() if value else None


class ConferenceRepository:
    """Repository for conference data access."""

    def __init__(self, db: Optional[Database] = None):
        self.db = db or database

    def name_order(self) -> str:
        """ORDER BY clause sorting names by code point on every backend."""
        # SQLite compares TEXT as binary by default
        return 'ORDER BY name COLLATE "C"' if is_postgres(self.db) else "ORDER BY name"

    def transaction(self):
        """Database transaction shared by every repository on this connection."""
        return self.db.transaction()

    def _to_record(self, row) -> Dict[str, Any]:
        data = row_to_dict(row)
        data["topics"] = parse_jsonb(data["topics"])
        return data

    async def allocate_id(self, parent: ProfileKey) -> int:
        """Allocate a new conference id under the given profile key."""
        query = """
            INSERT INTO conference_id_allocations (parent_user_id)
            VALUES (:parent_user_id)
            RETURNING id
        """
        conference_id = await self.db.fetch_val(query, {"parent_user_id": parent.user_id})
        logger.debug(f"[ConferenceRepository.allocate_id] parent={parent.user_id}, id={conference_id}")
        return int(conference_id)

    async def insert(self, conference: Dict[str, Any]) -> None:
        """Insert a new conference row."""
        query = """
            INSERT INTO conferences (
                id, organizer_user_id, name, description, topics, city,
                start_date, month, end_date, max_attendees, seats_available
            )
            VALUES (
                :id, :organizer_user_id, :name, :description, :topics, :city,
                :start_date, :month, :end_date, :max_attendees, :seats_available
            )
        """
        values = dict(conference)
        values["topics"] = json.dumps(values.get("topics") or [])
        values["start_date"] = _iso(values.get("start_date"))
        values["end_date"] = _iso(values.get("end_date"))
        await self.db.execute(query, values)

    async def get(self, key: ConferenceKey) -> Optional[Dict[str, Any]]:
        """Load a conference by its full key."""
        query = f"""
            SELECT {CONFERENCE_COLUMNS}
            FROM conferences
            WHERE organizer_user_id = :organizer_user_id AND id = :id
        """
        row = await self.db.fetch_one(query, {
            "organizer_user_id": key.parent.user_id,
            "id": key.id,
        })
        if not row:
            return None
        return self._to_record(row)

    async def list_ordered_by_name(self) -> List[Dict[str, Any]]:
        """List every conference ordered by name."""
        query = f"SELECT {CONFERENCE_COLUMNS} FROM conferences {self.name_order()}"
        rows = await self.db.fetch_all(query)
        return [self._to_record(row) for row in rows]

    async def list_by_parent(self, parent: ProfileKey) -> List[Dict[str, Any]]:
        """Ancestor query: conferences whose key sits under the given profile."""
        query = f"""
            SELECT {CONFERENCE_COLUMNS}
            FROM conferences
            WHERE organizer_user_id = :organizer_user_id
            {self.name_order()}
        """
        rows = await self.db.fetch_all(query, {"organizer_user_id": parent.user_id})
        return [self._to_record(row) for row in rows]

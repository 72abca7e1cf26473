"""
Profile Repository

Handles all database operations for the profiles table.
"""
import logging
import json
from typing import Optional, Dict, Any, List
from databases import Database
from conference_central.modules.database import database
from conference_central.modules.conferences.domain.profile import ProfileKey

logger = logging.getLogger("conference_central.profiles.repository")


def parse_jsonb(value: Any) -> Any:
    """
    Parse a JSON column value from database.

    NULL reads as an empty list. Corrupt JSON raises json.JSONDecodeError.
    """
    if isinstance(value, str):
        return json.loads(value)
    elif value is None:
        return []
    return value


def row_to_dict(row) -> Dict[str, Any]:
    return dict(row._mapping)


class ProfileRepository:
    """Repository for profile data access."""

    def __init__(self, db: Optional[Database] = None):
        self.db = db or database

    async def get(self, key: ProfileKey) -> Optional[Dict[str, Any]]:
        """Load a profile by key."""
        query = """
            SELECT user_id, display_name, main_email, tee_shirt_size, conference_keys_to_attend
            FROM profiles
            WHERE user_id = :user_id
        """
        row = await self.db.fetch_one(query, {"user_id": key.user_id})
        if not row:
            return None
        result = row_to_dict(row)
        result["conference_keys_to_attend"] = parse_jsonb(result["conference_keys_to_attend"])
        return result

    async def get_multi(self, keys: List[ProfileKey]) -> Dict[str, Dict[str, Any]]:
        """Load several profiles at once, keyed by user_id. Missing keys are absent."""
        user_ids = sorted({key.user_id for key in keys})
        if not user_ids:
            return {}

        params = {f"user_id_{i}": user_id for i, user_id in enumerate(user_ids)}
        query = f"""
            SELECT user_id, display_name, main_email, tee_shirt_size, conference_keys_to_attend
            FROM profiles
            WHERE user_id IN ({', '.join(':' + name for name in params)})
        """
        rows = await self.db.fetch_all(query, params)
        profiles = {}
        for row in rows:
            data = row_to_dict(row)
            data["conference_keys_to_attend"] = parse_jsonb(data["conference_keys_to_attend"])
            profiles[data["user_id"]] = data
        return profiles

    async def save(self, profile: Dict[str, Any]) -> None:
        """
        Insert or update a profile.

        main_email is written on insert only; the identity never changes.
        """
        query = """
            INSERT INTO profiles (user_id, display_name, main_email, tee_shirt_size, conference_keys_to_attend)
            VALUES (:user_id, :display_name, :main_email, :tee_shirt_size, :conference_keys_to_attend)
            ON CONFLICT (user_id) DO UPDATE SET
                display_name = excluded.display_name,
                tee_shirt_size = excluded.tee_shirt_size,
                conference_keys_to_attend = excluded.conference_keys_to_attend,
                updated_at = CURRENT_TIMESTAMP
        """
        await self.db.execute(query, {
            "user_id": profile["user_id"],
            "display_name": profile.get("display_name"),
            "main_email": profile.get("main_email"),
            "tee_shirt_size": profile["tee_shirt_size"],
            "conference_keys_to_attend": json.dumps(profile.get("conference_keys_to_attend") or []),
        })
        logger.debug(f"[ProfileRepository.save] user_id={profile['user_id']}")

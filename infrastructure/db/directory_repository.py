"""
Supabase implementations of the directory lookups.

Users, groups and the workout type catalog are managed elsewhere; this
module only reads them, except for user auto-provisioning.
"""
import logging
from typing import Optional, Dict, Any

from supabase import Client

logger = logging.getLogger(__name__)


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so the value only matches itself."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class SupabaseUserRepository:
    """
    Supabase implementation of UserRepository protocol.
    """

    TABLE = "users"

    def __init__(self, client: Client):
        self._client = client

    def _first(self, column: str, value: str) -> Optional[Dict[str, Any]]:
        result = self._client.table(self.TABLE).select("*").eq(column, value).limit(1).execute()
        if result.data:
            return result.data[0]
        return None

    def get(self, user_id: str) -> Optional[Dict[str, Any]]:
        return self._first("id", user_id)

    def get_by_external_id(self, external_id: str) -> Optional[Dict[str, Any]]:
        return self._first("external_id", external_id)

    def get_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        result = (
            self._client.table(self.TABLE)
            .select("*")
            .ilike("email", escape_like(email))
            .limit(1)
            .execute()
        )
        if result.data:
            return result.data[0]
        return None

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        result = self._client.table(self.TABLE).insert(data).execute()
        logger.info(f"Provisioned user {result.data[0].get('id')}")
        return result.data[0]

    def link_external_id(self, user_id: str, external_id: str) -> Optional[Dict[str, Any]]:
        result = (
            self._client.table(self.TABLE)
            .update({"external_id": external_id})
            .eq("id", user_id)
            .execute()
        )
        if result.data:
            return result.data[0]
        return None


class SupabaseGroupRepository:
    """
    Supabase implementation of GroupRepository protocol.
    """

    def __init__(self, client: Client):
        self._client = client

    def get(self, group_id: str) -> Optional[Dict[str, Any]]:
        result = self._client.table("groups").select("*").eq("id", group_id).limit(1).execute()
        if result.data:
            return result.data[0]
        return None


class SupabaseWorkoutTypeRepository:
    """
    Supabase implementation of WorkoutTypeRepository protocol.
    """

    def __init__(self, client: Client):
        self._client = client

    def get(self, workout_type_id: str) -> Optional[Dict[str, Any]]:
        result = (
            self._client.table("workout_types")
            .select("id, name, description")
            .eq("id", workout_type_id)
            .limit(1)
            .execute()
        )
        if result.data:
            return result.data[0]
        return None

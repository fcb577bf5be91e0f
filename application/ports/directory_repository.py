"""
Directory Repository Interfaces (Ports).

Lookups into records owned outside the workout session feature: users,
groups and the workout type catalog. Only users are written here, by
auto-provisioning from identity token claims.
"""
from typing import Protocol, Optional, Dict, Any


class UserRepository(Protocol):
    """
    Abstract interface for user records.
    """

    def get(self, user_id: str) -> Optional[Dict[str, Any]]:
        """
        Get a user by internal ID.

        Returns:
            User row (id, external_id, email, username) or None
        """
        ...

    def get_by_external_id(self, external_id: str) -> Optional[Dict[str, Any]]:
        """
        Get a user by identity provider subject ID.
        """
        ...

    def get_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        """
        Get a user by email (case-insensitive).
        """
        ...

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a user.

        Returns:
            The stored row including its id
        """
        ...

    def link_external_id(self, user_id: str, external_id: str) -> Optional[Dict[str, Any]]:
        """
        Attach an identity provider subject ID to an existing user.
        """
        ...


class GroupRepository(Protocol):
    """
    Abstract interface for group lookups.
    """

    def get(self, group_id: str) -> Optional[Dict[str, Any]]:
        """
        Get a group by ID.

        Returns:
            Group row or None if not found
        """
        ...


class WorkoutTypeRepository(Protocol):
    """
    Abstract interface for the workout type catalog.
    """

    def get(self, workout_type_id: str) -> Optional[Dict[str, Any]]:
        """
        Get a workout type by ID.

        Returns:
            Row with id, name, description or None if not found
        """
        ...

"""
Application-layer exceptions.

These exceptions are raised by use cases and infrastructure adapters and
mapped to HTTP status codes by the API layer.
"""

from typing import Optional


class NotFoundError(Exception):
    """A referenced entity does not exist in the store."""

    entity = "Resource"

    def __init__(self, entity_id: str, message: Optional[str] = None):
        self.entity_id = entity_id
        super().__init__(message or f"{self.entity} {entity_id} not found")


class SessionNotFoundError(NotFoundError):
    entity = "Workout session"


class GroupNotFoundError(NotFoundError):
    entity = "Group"


class ParticipantNotFoundError(NotFoundError):
    entity = "Participant"


class ScoreNotFoundError(NotFoundError):
    entity = "Score"


class UserNotFoundError(NotFoundError):
    entity = "User"


class InvalidSessionTransitionError(Exception):
    """The requested lifecycle operation is illegal for the session's status.

    The message names the current status ("Only Pending sessions can be
    started (current status: Completed)") so callers can see what blocked it.
    """

    def __init__(self, session_id: str, current_status, operation: str, allowed: str):
        self.session_id = session_id
        self.current_status = current_status
        self.operation = operation
        super().__init__(
            f"Only {allowed} sessions can be {operation} "
            f"(session {session_id}, current status: {current_status.label})"
        )


class SessionClosedError(Exception):
    """A roster, station plan or score change was attempted at the wrong status."""

    def __init__(self, session_id: str, current_status, action: str):
        self.session_id = session_id
        self.current_status = current_status
        super().__init__(
            f"Cannot {action} for session {session_id} "
            f"while it is {current_status.label}"
        )


class ConflictError(Exception):
    """A uniqueness constraint rejected the write."""

    pass


class DuplicateScoreError(ConflictError):
    """A score already exists for this (participant, round, station)."""

    def __init__(self, participant_id: str, round_number: int, station_index: int):
        self.participant_id = participant_id
        self.round_number = round_number
        self.station_index = station_index
        super().__init__(
            f"Participant {participant_id} already has a score for "
            f"round {round_number}, station {station_index}"
        )


class ParticipantAlreadyJoinedError(ConflictError):
    """The user is already on this session's roster."""

    def __init__(self, session_id: str, user_id: str):
        self.session_id = session_id
        self.user_id = user_id
        super().__init__(f"User {user_id} has already joined session {session_id}")


class ParticipantIndexConflictError(ConflictError):
    """Another join took the same participant index first."""

    def __init__(self, session_id: str, participant_index: int):
        self.session_id = session_id
        self.participant_index = participant_index
        super().__init__(
            f"Participant index {participant_index} of session {session_id} was taken by another join"
        )


class FieldValidationError(ValueError):
    """A request value failed a field check."""

    pass


class ScoreValidationError(FieldValidationError):
    """A score submission or correction failed a field check."""

    pass


class StationValidationError(FieldValidationError):
    """A station plan change failed a field check."""

    pass

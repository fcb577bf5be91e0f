"""
Domain converters between Supabase rows and the workout session models.

All converters are pure functions with no side effects.

Examples:
    >>> from domain.converters import db_row_to_session, session_to_db_row

    >>> session = db_row_to_session(row)
    >>> row = session_to_db_row(session)
"""

from domain.converters.db_converters import (
    db_row_to_participant,
    db_row_to_score,
    db_row_to_session,
    db_row_to_station,
    participant_to_db_row,
    score_to_db_row,
    session_to_db_row,
    status_change_to_db_row,
)

__all__ = [
    "db_row_to_session",
    "session_to_db_row",
    "status_change_to_db_row",
    "db_row_to_participant",
    "participant_to_db_row",
    "db_row_to_station",
    "db_row_to_score",
    "score_to_db_row",
]

"""
Converters between MongoDB documents and domain models.
"""

from domain.converters.db_converters import (
    doc_to_workout,
    parse_object_id,
    workout_to_doc,
)

__all__ = [
    "doc_to_workout",
    "parse_object_id",
    "workout_to_doc",
]

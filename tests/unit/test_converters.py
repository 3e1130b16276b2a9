"""
Tests for domain models and MongoDB document converters.
"""

import logging

import pytest
from bson import ObjectId
from pydantic import ValidationError

from application.exceptions import InvalidWorkoutIdError, WorkoutStoreError
from domain.converters import doc_to_workout, parse_object_id, workout_to_doc
from domain.models import Workout, WorkoutCreate, WorkoutUpdate

pytestmark = pytest.mark.unit


class TestParseObjectId:

    def test_valid_hex_id(self):
        oid = ObjectId()
        assert parse_object_id(str(oid)) == oid

    @pytest.mark.parametrize("bad_id", ["", "abc", "zzzzzzzzzzzzzzzzzzzzzzzz", "65a1f0c2e4b0a1b2c3d4e5f"])
    def test_malformed_id_raises(self, bad_id):
        with pytest.raises(InvalidWorkoutIdError) as exc_info:
            parse_object_id(bad_id)

        assert exc_info.value.workout_id == bad_id
        assert exc_info.value.status_code == 400


class TestDocToWorkout:

    def test_maps_object_id_to_string(self):
        oid = ObjectId()
        workout = doc_to_workout({"_id": oid, "title": "Deadlift", "reps": 3, "load": 180})

        assert workout == Workout(id=str(oid), title="Deadlift", reps=3, load=180)

    def test_ignores_unknown_fields(self):
        oid = ObjectId()
        workout = doc_to_workout({"_id": oid, "title": "Row", "reps": 10, "load": 40, "legacy": True})

        assert workout.model_dump() == {"id": str(oid), "title": "Row", "reps": 10, "load": 40}

    @pytest.mark.parametrize("doc", [
        {"title": "Legacy", "reps": 5},
        {"title": "Legacy", "load": 80},
        {"reps": 5, "load": 80},
    ])
    def test_missing_field_raises_store_error(self, doc):
        oid = ObjectId()

        with pytest.raises(WorkoutStoreError) as exc_info:
            doc_to_workout({"_id": oid, **doc})

        assert exc_info.value.code == "internal"
        assert exc_info.value.message == f"Stored workout {oid} is malformed"

    @pytest.mark.parametrize("field, value", [
        ("reps", "five"),
        ("load", None),
        ("title", ["Squat"]),
    ])
    def test_wrong_type_raises_store_error(self, field, value):
        doc = {"_id": ObjectId(), "title": "Squat", "reps": 5, "load": 100, field: value}

        with pytest.raises(WorkoutStoreError):
            doc_to_workout(doc)

    def test_malformed_document_is_logged(self, caplog):
        oid = ObjectId()

        with caplog.at_level(logging.ERROR, logger="domain.converters.db_converters"):
            with pytest.raises(WorkoutStoreError):
                doc_to_workout({"_id": oid, "title": "Legacy"})

        assert f"Stored workout {oid} is malformed" in caplog.text


class TestWorkoutToDoc:

    def test_create_never_carries_id(self):
        doc = workout_to_doc(WorkoutCreate(title="Squat", reps=5, load=100))
        assert doc == {"title": "Squat", "reps": 5, "load": 100}

    def test_update_fields(self):
        doc = workout_to_doc(WorkoutUpdate(title="Squat", reps=8, load=120))
        assert doc == {"title": "Squat", "reps": 8, "load": 120}


class TestModels:

    def test_create_ignores_id(self):
        model = WorkoutCreate.model_validate({"id": "abc", "title": "Squat", "reps": 5, "load": 100})
        assert "id" not in model.model_dump()

    def test_create_requires_all_fields(self):
        with pytest.raises(ValidationError):
            WorkoutCreate.model_validate({"title": "Squat", "reps": 5})

    def test_update_requires_all_fields(self):
        with pytest.raises(ValidationError):
            WorkoutUpdate.model_validate({"reps": 5, "load": 100})

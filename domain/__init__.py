"""
Domain layer for the Workout Store API.

- models/: Pydantic models for the workout document
- converters/: Mapping between MongoDB documents and domain models
"""

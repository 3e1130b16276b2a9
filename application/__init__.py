"""
Application layer for the Workout Store API.

- ports/: Repository interfaces (Protocols)
- exceptions.py: Typed errors shared by every layer
"""

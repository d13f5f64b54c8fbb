"""Pydantic Schemas — response shapes for API endpoints.

Invariants:
    - Schemas describe what is returned; request bodies are never validated
"""

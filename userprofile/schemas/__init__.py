"""API Schemas — Pydantic models for request parsing and response serialization."""

"""Schemas — Pydantic models for the public API and the upstream wire format."""

"""Pydantic schemas shared across the service."""

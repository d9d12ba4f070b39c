"""Pydantic output schemas for cmd_* results."""

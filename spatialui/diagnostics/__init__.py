"""Serialization helpers for log and scene export paths."""

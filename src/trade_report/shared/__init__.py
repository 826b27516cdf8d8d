"""Shared models, formatting, errors and observability helpers."""

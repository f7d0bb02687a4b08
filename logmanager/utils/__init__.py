"""Utility helpers for LogManager."""

"""Encoders for collection values."""

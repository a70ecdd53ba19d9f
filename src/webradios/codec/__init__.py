"""Conversions between favorites and what is stored on disk."""

"""Core parsing engine."""

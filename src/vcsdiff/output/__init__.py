"""Reporters for diff results."""

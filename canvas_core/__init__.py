"""Interaction core of the Venture Canvas wizard (no UI dependencies)."""

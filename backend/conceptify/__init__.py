"""Conceptify - network topology whiteboard backend."""

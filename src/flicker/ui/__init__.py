"""Flicker TUI package."""

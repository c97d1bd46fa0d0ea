"""Command line interface helpers for Flicker."""

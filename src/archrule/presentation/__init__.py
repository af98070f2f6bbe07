"""Presentation layer: CLI and pytest plugin."""

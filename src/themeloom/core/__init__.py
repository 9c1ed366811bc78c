"""Core theme loading: settings, exceptions, resolution and merging."""

"""Core utilities: settings, logging setup and error mapping."""

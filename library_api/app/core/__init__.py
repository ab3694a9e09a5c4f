"""Core infrastructure: settings, logging, database and shared errors."""

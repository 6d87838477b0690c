"""SQLite persistence for the track store."""

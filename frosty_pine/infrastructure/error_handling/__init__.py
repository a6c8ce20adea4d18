"""Error logging and user-facing messages."""

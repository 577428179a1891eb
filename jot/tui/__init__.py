"""Terminal user interface for jot, built on textual."""

"""Input clients for quest-lift."""

"""Railway station, platform and line scheduling."""

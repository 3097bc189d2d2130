"""Core similarity, configuration, and logging infrastructure."""

"""Core components: fetching and extraction."""

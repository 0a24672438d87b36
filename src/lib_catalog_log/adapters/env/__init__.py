"""Environment settings loader."""

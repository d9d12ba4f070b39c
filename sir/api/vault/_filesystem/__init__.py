"""Directory-backed vault host."""

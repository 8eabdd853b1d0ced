"""Table application layer."""

"""Column application layer."""

"""Repository implementations."""

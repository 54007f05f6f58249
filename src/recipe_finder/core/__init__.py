"""Core application infrastructure: configuration, errors, middleware."""

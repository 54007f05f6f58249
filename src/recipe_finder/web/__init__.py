"""Server-rendered web front-end."""

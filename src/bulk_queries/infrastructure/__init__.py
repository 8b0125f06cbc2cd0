"""Infrastructure layer: SQL generation building blocks."""

"""I/O layer: running generated statements against a live database."""

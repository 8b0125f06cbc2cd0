"""Statement builders for bulk INSERT, UPDATE and DELETE."""

from .delete import generate_delete
from .insert import DEFAULT_BATCH_SIZE, generate_insert_batches
from .update import generate_update, generate_update_statements

__all__ = [
    "DEFAULT_BATCH_SIZE",
    "generate_delete",
    "generate_insert_batches",
    "generate_update",
    "generate_update_statements",
]

"""Shared utilities for bulk-queries."""

"""Shared utilities for result-table."""

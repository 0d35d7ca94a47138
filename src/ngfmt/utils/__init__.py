"""Shared utilities for ngfmt."""

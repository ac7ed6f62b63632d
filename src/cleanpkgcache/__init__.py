"""Retention cleanup for versioned package caches."""

__version__ = "0.3.0"

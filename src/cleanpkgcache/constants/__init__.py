"""Shared constants for cleanpkgcache."""

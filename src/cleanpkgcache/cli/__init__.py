"""Command-line interface for cleanpkgcache."""

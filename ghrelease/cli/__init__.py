"""Command-line driver for ghrelease."""

"""Command-line interface for Locksmith."""

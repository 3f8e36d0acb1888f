"""Command line interface for Lugat."""

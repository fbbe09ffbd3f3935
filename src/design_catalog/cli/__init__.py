"""Command line interface for the design catalog."""

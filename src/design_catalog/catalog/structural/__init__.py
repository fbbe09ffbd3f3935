"""Structural pattern demonstrations."""

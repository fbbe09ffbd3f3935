"""Creational pattern demonstrations."""

"""Catalog of OOP, SOLID and design pattern demonstrations."""

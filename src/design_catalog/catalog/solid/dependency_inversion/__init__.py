"""Dependency Inversion Principle: notifications."""

"""Liskov Substitution Principle: rectangles and squares."""

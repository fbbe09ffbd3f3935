"""Single Responsibility Principle: user registration."""

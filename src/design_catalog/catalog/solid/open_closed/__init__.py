"""Open/Closed Principle: report generation."""

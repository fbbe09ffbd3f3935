"""Application layer - catalog orchestration."""

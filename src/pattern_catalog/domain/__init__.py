"""Domain layer - catalog metadata and the exception hierarchy."""

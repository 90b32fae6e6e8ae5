"""Application layer - use cases and the app store."""

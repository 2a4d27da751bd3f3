"""Application layer - query handlers and DTOs."""

"""Infrastructure layer - technical concerns."""

"""Application layer - request refinement and result enumeration."""

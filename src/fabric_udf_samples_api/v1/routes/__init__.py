"""Routes included in the /api/v1 router."""

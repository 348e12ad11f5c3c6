"""Application layer - estimation services independent of page adapters."""

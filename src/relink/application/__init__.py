"""Application layer wiring features to adapters."""

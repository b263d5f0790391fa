"""Application layer – the batching and dispatch engine."""

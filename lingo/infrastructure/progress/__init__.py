"""Progress adapters."""

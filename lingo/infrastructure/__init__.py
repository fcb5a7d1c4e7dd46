"""Adapters: persistence, HTTP and identity."""

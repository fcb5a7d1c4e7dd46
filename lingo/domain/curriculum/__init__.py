"""Curriculum module: read-only course → unit → lesson → challenge snapshots."""

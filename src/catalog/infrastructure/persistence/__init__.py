"""Persistence adapters for the catalog repositories."""

"""Shared interfaces for cross-layer coordination."""

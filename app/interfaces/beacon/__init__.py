"""Beacon query routes and wire schemas."""

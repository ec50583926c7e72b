"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that beacon domain errors
are consistently translated into Beacon API error bodies.
"""

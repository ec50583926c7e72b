"""
Application layer for the beacon bounded context.

Use cases coordinate the domain normalizer for the interface layer.
No framework or infrastructure imports allowed.
"""

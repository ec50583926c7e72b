"""
Beacon Query API.

Normalizes and validates Beacon allele queries and maps beacon
errors to Beacon-style HTTP error bodies.

Layers:
    - domain: Vocabularies, the allele request, normalization rules, errors.
    - application: Use cases and DTOs.
    - interfaces: FastAPI routers, Pydantic wire schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
    - core: Configuration.
"""

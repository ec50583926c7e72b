"""
Dependency injection for the beacon bounded context.

Provides FastAPI dependency functions that build use cases.
These are the composition root for the beacon context.
"""

from app.application.beacon.normalize_query import (
    BuildAlleleQueryUseCase,
    NormalizeAlleleRequestUseCase,
)


def get_build_allele_query_use_case() -> BuildAlleleQueryUseCase:
    """Build BuildAlleleQueryUseCase."""
    return BuildAlleleQueryUseCase()


def get_normalize_allele_request_use_case() -> NormalizeAlleleRequestUseCase:
    """Build NormalizeAlleleRequestUseCase."""
    return NormalizeAlleleRequestUseCase()

"""
FastAPI router for the beacon bounded context.

All routes delegate to use cases. No business logic here.
Input shape is checked by Pydantic schemas; semantic validation
errors are mapped by the centralized error handlers.
"""

from fastapi import APIRouter, Depends, Query, Request

from app.application.beacon.dtos import BuildAlleleQueryCommand
from app.application.beacon.normalize_query import (
    BuildAlleleQueryUseCase,
    NormalizeAlleleRequestUseCase,
)
from app.core.config import settings
from app.interfaces.beacon.dependencies import (
    get_build_allele_query_use_case,
    get_normalize_allele_request_use_case,
)
from app.interfaces.beacon.schemas import (
    AlleleRequestSchema,
    AlleleResponseSchema,
    BeaconErrorSchema,
)
from app.shared.security.rate_limiting import limiter

router = APIRouter(prefix="/beacon", tags=["beacon"])


@router.get(
    "/query",
    response_model=AlleleRequestSchema,
    responses={500: {"model": BeaconErrorSchema}},
    summary="Build an allele query",
    description="Normalize raw query parameters into a canonical allele request.",
)
@limiter.limit(settings.rate_limit_default)
def build_allele_query(
    request: Request,
    reference_name: str | None = Query(default=None, alias="referenceName"),
    start: int | None = Query(default=None),
    reference_bases: str | None = Query(default=None, alias="referenceBases"),
    alternate_bases: str | None = Query(default=None, alias="alternateBases"),
    assembly_id: str | None = Query(default=None, alias="assemblyId"),
    dataset_ids: list[str] | None = Query(default=None, alias="datasetIds"),
    include_dataset_responses: bool | None = Query(
        default=None, alias="includeDatasetResponses"
    ),
    use_case: BuildAlleleQueryUseCase = Depends(get_build_allele_query_use_case),
) -> AlleleRequestSchema:
    """Build a normalized allele request from query parameters."""
    command = BuildAlleleQueryCommand(
        reference_name=reference_name,
        start=start,
        reference_bases=reference_bases,
        alternate_bases=alternate_bases,
        assembly_id=assembly_id,
        dataset_ids=dataset_ids or [],
        include_dataset_responses=include_dataset_responses,
    )
    result = use_case.execute(command)
    return AlleleRequestSchema.from_entity(result)


@router.post(
    "/query",
    response_model=AlleleRequestSchema,
    responses={
        400: {"model": AlleleResponseSchema},
        500: {"model": BeaconErrorSchema},
    },
    summary="Normalize an allele request",
    description="Validate an allele request and return it in canonical form.",
)
@limiter.limit(settings.rate_limit_default)
def normalize_allele_request(
    request: Request,
    allele_request: AlleleRequestSchema,
    use_case: NormalizeAlleleRequestUseCase = Depends(
        get_normalize_allele_request_use_case
    ),
) -> AlleleRequestSchema:
    """Validate and normalize a client-supplied allele request."""
    result = use_case.execute(allele_request.to_entity())
    return AlleleRequestSchema.from_entity(result)

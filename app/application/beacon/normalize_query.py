"""
Use cases: Build and normalize Beacon allele queries.

Input: BuildAlleleQueryCommand, or an AlleleRequest
Output: AlleleRequest (normalized)
Side effects: NormalizeAlleleRequestUseCase rewrites the request in place.
Failure cases: InvalidAlleleRequestError.
"""

import logging

from app.application.beacon.dtos import BuildAlleleQueryCommand
from app.domain.beacon.entities import AlleleRequest
from app.domain.beacon.query import build_query, normalize_request

logger = logging.getLogger(__name__)


class BuildAlleleQueryUseCase:
    """Builds a canonical allele request from raw query parameters."""

    def execute(self, command: BuildAlleleQueryCommand) -> AlleleRequest:
        """Run the query building use case.

        Args:
            command: Raw query parameters as received by the API.

        Returns:
            A newly built, normalized allele request.
        """
        logger.info(
            "Building allele query reference=%s, start=%s, assembly=%s",
            command.reference_name,
            command.start,
            command.assembly_id,
        )
        return build_query(
            reference_name=command.reference_name,
            start=command.start,
            reference_bases=command.reference_bases,
            alternate_bases=command.alternate_bases,
            assembly_id=command.assembly_id,
            dataset_ids=list(command.dataset_ids),
            include_dataset_responses=command.include_dataset_responses,
        )


class NormalizeAlleleRequestUseCase:
    """Validates a client-supplied allele request and normalizes it."""

    def execute(self, request: AlleleRequest) -> AlleleRequest:
        """Run the normalization use case.

        Args:
            request: The request to validate and normalize in place.

        Returns:
            The same request object, normalized.
        """
        logger.info(
            "Normalizing allele request reference=%s, start=%s, assembly=%s",
            request.reference_name,
            request.start,
            request.assembly_id,
        )
        return normalize_request(request)

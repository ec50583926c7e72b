"""
Pydantic schemas for the Beacon API wire format.

Field names are camelCase on the wire to stay compatible with
Beacon clients; Python code uses the snake_case attribute names.
No business logic belongs here.
"""

from dataclasses import asdict

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.domain.beacon.entities import AlleleError, AlleleRequest


class BeaconSchema(BaseModel):
    """Base schema: camelCase aliases, accepting either spelling on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AlleleRequestSchema(BeaconSchema):
    """A Beacon allele request.

    Attributes:
        reference_name: Chromosome or contig name.
        start: 0-based start position.
        reference_bases: Reference bases.
        alternate_bases: Alternate bases.
        assembly_id: Genome assembly identifier.
        dataset_ids: Datasets to restrict the query to.
        include_dataset_responses: Whether per-dataset responses are wanted.
    """

    reference_name: str | None = None
    start: int | None = None
    reference_bases: str | None = None
    alternate_bases: str | None = None
    assembly_id: str | None = None
    dataset_ids: list[str] = Field(default_factory=list)
    include_dataset_responses: bool | None = None

    @classmethod
    def from_entity(cls, request: AlleleRequest) -> "AlleleRequestSchema":
        """Build the wire schema from a domain request."""
        return cls(**asdict(request))

    def to_entity(self) -> AlleleRequest:
        """Build a domain request from the wire schema."""
        return AlleleRequest(
            reference_name=self.reference_name,
            start=self.start,
            reference_bases=self.reference_bases,
            alternate_bases=self.alternate_bases,
            assembly_id=self.assembly_id,
            dataset_ids=list(self.dataset_ids),
            include_dataset_responses=self.include_dataset_responses,
        )


class BeaconErrorSchema(BeaconSchema):
    """Error body: ``{"errorCode": ..., "message": ...}``."""

    error_code: int
    message: str

    @classmethod
    def from_entity(cls, error: AlleleError) -> "BeaconErrorSchema":
        return cls(error_code=error.code, message=error.message)


class AlleleResponseSchema(BeaconSchema):
    """Allele response returned when a request is rejected.

    ``exists`` is always null here: no dataset was queried.
    """

    allele_request: AlleleRequestSchema | None = None
    exists: bool | None = None
    error: BeaconErrorSchema | None = None


class HealthResponse(BaseModel):
    """Liveness payload: ``status`` is always "ok" when the app answers."""

    status: str
    service: str
    version: str

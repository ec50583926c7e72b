"""
Data Transfer Objects for the beacon application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class BuildAlleleQueryCommand:
    """Input DTO for building an allele query from raw parameters.

    Attributes:
        reference_name: Chromosome or contig name, as sent by the client.
        start: 0-based start position.
        reference_bases: Reference bases.
        alternate_bases: Alternate bases.
        assembly_id: Genome assembly identifier (hg* or GRCh*/NCBI*).
        dataset_ids: Datasets to restrict the query to.
        include_dataset_responses: Whether per-dataset responses are wanted.
    """

    reference_name: str | None
    start: int | None
    reference_bases: str | None
    alternate_bases: str | None
    assembly_id: str | None
    dataset_ids: list[str] = field(default_factory=list)
    include_dataset_responses: bool | None = None

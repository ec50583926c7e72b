"""
Domain entities for the beacon bounded context.

Closed vocabularies for chromosomes and genome assemblies, plus the
allele request value object. No framework imports and no IO.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class Chromosome(Enum):
    """Canonical chromosome labels.

    Declared longest label first: reference names are matched by suffix
    and the first member that matches wins, so "chr11" is 11, not 1.
    """

    CHR10 = "10"
    CHR11 = "11"
    CHR12 = "12"
    CHR13 = "13"
    CHR14 = "14"
    CHR15 = "15"
    CHR16 = "16"
    CHR17 = "17"
    CHR18 = "18"
    CHR19 = "19"
    CHR20 = "20"
    CHR21 = "21"
    CHR22 = "22"
    CHRMT = "MT"
    CHR1 = "1"
    CHR2 = "2"
    CHR3 = "3"
    CHR4 = "4"
    CHR5 = "5"
    CHR6 = "6"
    CHR7 = "7"
    CHR8 = "8"
    CHR9 = "9"
    CHRX = "X"
    CHRY = "Y"


class Reference(Enum):
    """Supported genome assemblies, named by their UCSC build."""

    HG38 = "HG38"
    HG19 = "HG19"
    HG18 = "HG18"
    HG17 = "HG17"
    HG16 = "HG16"

    @property
    def alias(self) -> str:
        """Return the GRC/NCBI name of this assembly."""
        return ASSEMBLY_ALIASES[self]


# Read-only after import.
ASSEMBLY_ALIASES: Mapping[Reference, str] = MappingProxyType(
    {
        Reference.HG38: "GRCh38",
        Reference.HG19: "GRCh37",
        Reference.HG18: "NCBI36",
        Reference.HG17: "NCBI35",
        Reference.HG16: "NCBI34",
    }
)


@dataclass
class AlleleRequest:
    """A Beacon allele query.

    Mutable on purpose: normalization rewrites fields in place.

    Attributes:
        reference_name: Chromosome or contig name.
        start: 0-based start position.
        reference_bases: Reference allele bases.
        alternate_bases: Alternate allele bases.
        assembly_id: Genome assembly identifier.
        dataset_ids: Datasets to restrict the query to.
        include_dataset_responses: Whether per-dataset responses are wanted.
    """

    reference_name: Optional[str] = None
    start: Optional[int] = None
    reference_bases: Optional[str] = None
    alternate_bases: Optional[str] = None
    assembly_id: Optional[str] = None
    dataset_ids: list[str] = field(default_factory=list)
    include_dataset_responses: Optional[bool] = None


@dataclass(frozen=True)
class AlleleError:
    """Error payload returned to Beacon clients."""

    code: int
    message: str

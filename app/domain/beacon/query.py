"""
Domain service: allele query normalization and validation.

Turns free-form query values (chromosome names, assembly ids, allele
strings, coordinates) into their canonical form. Pure functions over
strings, except ``normalize_request`` which rewrites its argument.

Unrecognized input normalizes to ``None``.
"""

from __future__ import annotations

import re
from typing import Optional

from app.domain.beacon.entities import (
    ASSEMBLY_ALIASES,
    AlleleRequest,
    Chromosome,
    Reference,
)
from app.domain.beacon.errors import InvalidAlleleRequestError

# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

_ALLELE_PATTERN = re.compile(r"([D,I])|([A,C,T,G]+)")
_ALLELE_KEYWORDS = ("DEL", "INS")


# ---------------------------------------------------------------------------
# Normalizers
# ---------------------------------------------------------------------------


def normalize_reference(chrom: Optional[str]) -> Optional[Chromosome]:
    """Generate a canonical chromosome from a reference name.

    Args:
        chrom: Chromosome name in any case, e.g. ``"chr7"`` or ``"X"``.

    Returns:
        The first chromosome whose label ends the uppercased name, or None.
    """
    if chrom is None:
        return None

    orig = chrom.upper()
    for candidate in Chromosome:
        if orig.endswith(candidate.value):
            return candidate
    return None


def is_valid_reference(reference_name: Optional[str]) -> bool:
    """Return True if the reference name resolves to a known chromosome."""
    return normalize_reference(reference_name) is not None


def normalize_position(pos: Optional[int]) -> Optional[int]:
    """Convert a 0-based position to a 1-based position."""
    if pos is None:
        return None
    return pos + 1


def normalize_allele(allele: Optional[str]) -> Optional[str]:
    """Generate a canonical allele string.

    ``DEL`` and ``INS`` collapse to ``D`` and ``I``. Otherwise the value
    must be a single ``D``/``I`` or a run of nucleotides.

    Args:
        allele: Allele in any case.

    Returns:
        The uppercased allele, or None if it is empty or unrecognized.
    """
    if not allele:
        return None

    res = allele.upper()
    if res in _ALLELE_KEYWORDS:
        return res[0]
    if _ALLELE_PATTERN.fullmatch(res):
        return res
    return None


def normalize_assembly(ref: Optional[str]) -> Optional[Reference]:
    """Generate a canonical genome assembly (hg*).

    Build names (``hg19``) take precedence over their aliases (``GRCh37``).
    Both comparisons ignore case.
    """
    if not ref:
        return None

    wanted = ref.casefold()
    for assembly in ASSEMBLY_ALIASES:
        if assembly.value.casefold() == wanted:
            return assembly
    for assembly, alias in ASSEMBLY_ALIASES.items():
        if alias.casefold() == wanted:
            return assembly
    return None


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


def build_query(
    reference_name: Optional[str],
    start: Optional[int],
    reference_bases: Optional[str],
    alternate_bases: Optional[str],
    assembly_id: Optional[str],
    dataset_ids: Optional[list[str]],
    include_dataset_responses: Optional[bool],
) -> AlleleRequest:
    """Assemble a normalized allele request from raw query parameters.

    Args:
        reference_name: Name of the chromosome or contig.
        start: 0-based start position, passed through unchanged.
        reference_bases: Reference bases.
        alternate_bases: Alternate bases.
        assembly_id: Genome assembly build id. Must be recognized.
        dataset_ids: Datasets to query, passed through unchanged.
        include_dataset_responses: Passed through unchanged.

    Returns:
        A new AlleleRequest.
    """
    chrom = normalize_reference(reference_name)
    assembly = normalize_assembly(assembly_id)

    return AlleleRequest(
        reference_name=None if chrom is None else chrom.value,
        start=start,
        reference_bases=normalize_allele(reference_bases),
        alternate_bases=normalize_allele(alternate_bases),
        assembly_id=assembly.value,
        dataset_ids=dataset_ids if dataset_ids is not None else [],
        include_dataset_responses=include_dataset_responses,
    )


def normalize_request(request: AlleleRequest) -> AlleleRequest:
    """Validate an allele request, then normalize it in place.

    Raises:
        InvalidAlleleRequestError: If the request fails validation.
    """
    validate_request(request)

    request.reference_name = normalize_allele(request.reference_bases)
    request.alternate_bases = normalize_allele(request.alternate_bases)
    request.assembly_id = normalize_assembly(request.assembly_id).value
    request.reference_name = normalize_reference(request.reference_name).value

    return request


def validate_request(request: AlleleRequest) -> None:
    """Validate an allele request. The first failing check wins.

    Raises:
        InvalidAlleleRequestError: Carrying the request and the reason.
    """
    if request.reference_name is not None or not is_valid_reference(
        request.reference_name
    ):
        raise InvalidAlleleRequestError(
            "Invalid reference passed in request", request
        )
    if request.start is None or request.start < 0:
        raise InvalidAlleleRequestError("Invalid start position in request", request)
    if request.reference_bases is None:
        raise InvalidAlleleRequestError("Invalid reference bases in request", request)
    if request.alternate_bases is None:
        raise InvalidAlleleRequestError("Invalid alternate bases in request", request)
    if request.assembly_id is None:
        raise InvalidAlleleRequestError("Invalid assembly", request)

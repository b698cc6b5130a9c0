"""Regions located on a strand of a contig."""

from __future__ import annotations

from dataclasses import dataclass

from svart import ops
from svart.contig import Contig
from svart.errors import IllegalValueError
from svart.ops import Located
from svart.strand import Strand


@dataclass(frozen=True, order=True)
class GenomicRegion(Located):
    """A region on one strand of a contig; ``end`` must lie within the contig."""

    contig: Contig
    start: int
    end: int
    strand: Strand

    def __post_init__(self) -> None:
        if self.start > self.end or self.contig.end < self.end:
            raise IllegalValueError("Genomic region does not fit on its contig.")

    def start_on_strand(self, strand: Strand) -> int:
        """Return the start coordinate as seen from ``strand``."""
        if self.strand == strand:
            return self.start
        return self.contig.end - self.end

    def end_on_strand(self, strand: Strand) -> int:
        """Return the end coordinate as seen from ``strand``."""
        if self.strand == strand:
            return self.end
        return self.contig.end - self.start

    def _other_on_my_strand(self, other: GenomicRegion) -> tuple[int, int]:
        return other.start_on_strand(self.strand), other.end_on_strand(self.strand)

    def contains(self, other: GenomicRegion) -> bool:
        """Return True when ``other`` lies fully within this region on the same contig."""
        if self.contig != other.contig:
            return False
        other_start, other_end = self._other_on_my_strand(other)
        return ops.contains(self.start, self.end, other_start, other_end)

    def overlaps(self, other: GenomicRegion) -> bool:
        """Return True when ``other`` overlaps this region on the same contig."""
        if self.contig != other.contig:
            return False
        other_start, other_end = self._other_on_my_strand(other)
        return ops.overlaps(self.start, self.end, other_start, other_end)
"""Genome builds: an identifier and a set of contigs."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from svart.contig import Contig


@dataclass(frozen=True, order=True)
class GenomeBuildIdentifier:
    """Major assembly name and patch of a genome build."""

    major_assembly: str
    patch: str


@dataclass(frozen=True, init=False)
class GenomeBuild:
    """A genome build; its contigs are kept sorted by name."""

    id: GenomeBuildIdentifier
    contigs: tuple[Contig, ...] = field(default=())

    def __init__(self, id: GenomeBuildIdentifier, contigs: Iterable[Contig]) -> None:
        object.__setattr__(self, "id", id)
        object.__setattr__(self, "contigs", tuple(sorted(contigs, key=lambda c: c.name)))

    def _find(self, name: str, attribute: str) -> Contig | None:
        return next(
            (c for c in self.contigs if c.name == name or getattr(c, attribute) == name),
            None,
        )

    def contig_from_genbank(self, name: str) -> Contig | None:
        """Find a contig by name or GenBank accession."""
        return self._find(name, "gen_bank_accession")

    def contig_from_refseq(self, name: str) -> Contig | None:
        """Find a contig by name or RefSeq accession."""
        return self._find(name, "ref_seq_accession")

    def contig_from_ucsc(self, name: str) -> Contig | None:
        """Find a contig by name or UCSC name."""
        return self._find(name, "ucsc_name")
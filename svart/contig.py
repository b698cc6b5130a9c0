"""Contigs and the vocabularies that describe them."""

from __future__ import annotations

from enum import Enum
from functools import total_ordering

from svart.errors import IllegalValueError
from svart.ops import Located


class _DeclarationOrderedEnum(Enum):
    """Enum whose members sort in the order they are declared."""

    def _rank(self) -> int:
        return list(type(self)).index(self)

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._rank() < other._rank()

    def __le__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._rank() <= other._rank()

    def __gt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._rank() > other._rank()

    def __ge__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._rank() >= other._rank()


class SequenceRole(_DeclarationOrderedEnum):
    """Role of a sequence within a genome assembly."""

    ASSEMBLED_MOLECULE = "assembled-molecule"
    UNLOCALIZED_SCAFFOLD = "unlocalized-scaffold"
    UNPLACED_SCAFFOLD = "unplaced-scaffold"
    FIX_PATCH = "fix-patch"
    NOVEL_PATCH = "novel-patch"
    ALT_SCAFFOLD = "alt-scaffold"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: str) -> SequenceRole:
        """Parse a role name case-insensitively; unrecognised names give UNKNOWN."""
        key = value.upper()
        for member in cls:
            if member.value.upper() == key:
                return member
        return cls.UNKNOWN


class AssignedMoleculeType(_DeclarationOrderedEnum):
    """Type of molecule a sequence is assigned to."""

    CHROMOSOME = "chromosome"
    MITOCHONDRION = "mitochondrion"
    CHLOROPLAST = "chloroplast"
    MITOCHONDRIAL_PLASMID = "mitochondrial plasmid"
    PLASMID = "plasmid"
    SEGMENT = "segment"
    LINKAGE_GROUP = "linkage group"
    UNKNOWN = "na"

    @classmethod
    def parse(cls, value: str) -> AssignedMoleculeType:
        """Parse a molecule type case-insensitively; unrecognised names give UNKNOWN."""
        key = value.upper()
        for member in cls:
            if member.value.upper() == key:
                return member
        return cls.UNKNOWN


@total_ordering
class Contig(Located):
    """A named sequence of a genome assembly, spanning ``0`` to its length."""

    __slots__ = (
        "name",
        "sequence_role",
        "assigned_molecule",
        "assigned_molecule_type",
        "gen_bank_accession",
        "ref_seq_accession",
        "ucsc_name",
        "start",
        "end",
    )

    def __init__(
        self,
        name: str,
        sequence_role: SequenceRole,
        assigned_molecule: str,
        assigned_molecule_type: AssignedMoleculeType,
        length: int,
        gen_bank_accession: str,
        ref_seq_accession: str,
        ucsc_name: str,
    ) -> None:
        if length < 0:
            raise IllegalValueError("Contig length must not be negative.")
        self.name = name
        self.sequence_role = sequence_role
        self.assigned_molecule = assigned_molecule
        self.assigned_molecule_type = assigned_molecule_type
        self.gen_bank_accession = gen_bank_accession
        self.ref_seq_accession = ref_seq_accession
        self.ucsc_name = ucsc_name
        self.start = 0
        self.end = length

    @property
    def length(self) -> int:
        return self.end

    def _key(self) -> tuple:
        return (
            self.name,
            self.sequence_role,
            self.assigned_molecule,
            self.assigned_molecule_type,
            self.gen_bank_accession,
            self.ref_seq_accession,
            self.ucsc_name,
            self.start,
            self.end,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Contig):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Contig):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"Contig(name={self.name!r}, sequence_role={self.sequence_role}, "
            f"assigned_molecule={self.assigned_molecule!r}, "
            f"assigned_molecule_type={self.assigned_molecule_type}, "
            f"length={self.end}, gen_bank_accession={self.gen_bank_accession!r}, "
            f"ref_seq_accession={self.ref_seq_accession!r}, ucsc_name={self.ucsc_name!r})"
        )
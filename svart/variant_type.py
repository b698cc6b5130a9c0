"""Classification of variants from their reference and alternate alleles."""

from __future__ import annotations

from enum import Enum, auto

from svart.errors import IllegalValueError


class VariantType(Enum):
    """Kinds of sequence variants, including symbolic structural variants."""

    UNKNOWN = auto()
    SINGLE_NUCLEOTIDE = auto()
    MULTI_NUCLEOTIDE = auto()
    SYMBOLIC = auto()
    DELETION = auto()
    DELETION_ME = auto()
    DELETION_ALU = auto()
    DELETION_L1 = auto()
    DELETION_SVA = auto()
    DELETION_HERV = auto()
    INSERTION = auto()
    INSERTION_ME = auto()
    INSERTION_ALU = auto()
    INSERTION_L1 = auto()
    INSERTION_SVA = auto()
    INSERTION_HERV = auto()

    DUPLICATION = auto()
    DUPLICATION_TANDEM = auto()
    DUPLICATION_INVERSION_BEFORE = auto()
    DUPLICATION_INVERSION_AFTER = auto()

    INVERSION = auto()
    COPY_NUMBER = auto()
    BREAKEND = auto()

    COPY_NUMBER_GAIN = auto()
    COPY_NUMBER_LOSS = auto()
    COPY_NUMBER_LOH = auto()
    COPY_NUMBER_COMPLEX = auto()
    SHORT_TANDEM_REPEAT = auto()
    TRANSLOCATION = auto()

    @staticmethod
    def parse_type_vcf(alt: str) -> VariantType:
        """Determine the variant type of a VCF alternate allele."""
        if not alt:
            return VariantType.UNKNOWN
        stripped = _trim_angle_brackets(alt)
        variant_type = _VCF_TYPES.get(stripped, VariantType.UNKNOWN)
        if variant_type is not VariantType.UNKNOWN:
            return variant_type

        if stripped.startswith("BND") or VariantType.is_breakend(stripped):
            return VariantType.BREAKEND
        for prefix, candidate in _VCF_PREFIXES:
            if stripped.startswith(prefix):
                return candidate
        if VariantType.is_symbolic(alt):
            return VariantType.SYMBOLIC
        return VariantType.UNKNOWN

    @staticmethod
    def parse_type(ref: str, alt: str) -> VariantType:
        """Determine the variant type from reference and alternate alleles."""
        if VariantType.is_symbolic_alleles(ref, alt):
            return VariantType.parse_type_vcf(alt)
        if len(ref) == len(alt):
            if len(alt) == 1:
                return VariantType.SINGLE_NUCLEOTIDE
            return VariantType.MULTI_NUCLEOTIDE
        if len(ref) < len(alt):
            return VariantType.INSERTION
        return VariantType.DELETION

    @staticmethod
    def is_symbolic_alleles(ref: str, alt: str) -> bool:
        return VariantType.is_symbolic(alt) or VariantType.is_symbolic(ref)

    @staticmethod
    def is_symbolic(allele: str) -> bool:
        return VariantType.is_large_symbolic(allele) or VariantType.is_breakend(allele)

    @staticmethod
    def is_breakend(allele: str) -> bool:
        return VariantType.is_single_breakend(allele) or VariantType.is_mated_breakend(allele)

    @staticmethod
    def is_large_symbolic(allele: str) -> bool:
        return len(allele) > 1 and (allele[0] == "<" or allele[-1] == ">")

    @staticmethod
    def is_single_breakend(allele: str) -> bool:
        return len(allele) > 1 and (allele[0] == "." or allele[-1] == ".")

    @staticmethod
    def is_mated_breakend(allele: str) -> bool:
        return len(allele) > 1 and ("[" in allele or "]" in allele)

    @staticmethod
    def require_non_symbolic(alt: str) -> str:
        """Return ``alt`` unless it is empty, symbolic or multi-allelic."""
        if not alt or VariantType.is_symbolic(alt):
            raise IllegalValueError(f"Illegal symbolic alt allele {alt}")
        if "," in alt:
            raise IllegalValueError(f"Illegal multi-allelic alt allele {alt}")
        return alt

    @staticmethod
    def require_symbolic(alt: str) -> str:
        """Return ``alt`` if it is a large symbolic allele."""
        if not alt or not VariantType.is_large_symbolic(alt):
            raise IllegalValueError(f"Illegal non-symbolic or breakend alt allele {alt}")
        return alt

    @staticmethod
    def require_breakend(alt: str) -> str:
        """Return ``alt`` if it is a breakend allele."""
        if not alt or not VariantType.is_breakend(alt):
            raise IllegalValueError(f"Illegal non-breakend allele {alt}")
        return alt

    @staticmethod
    def require_non_breakend(alt: str) -> str:
        """Return ``alt`` unless it is empty or a breakend allele."""
        if not alt or VariantType.is_breakend(alt):
            raise IllegalValueError(f"Illegal breakend allele {alt}")
        return alt

    @staticmethod
    def is_missing_upstream_deletion(allele: str) -> bool:
        return allele == "*"

    @staticmethod
    def is_missing(allele: str) -> bool:
        return allele == "."


def _trim_angle_brackets(value: str) -> str:
    if value.startswith("<") and value.endswith(">"):
        return value[1:-1]
    return value


_VCF_TYPES: dict[str, VariantType] = {
    "SNP": VariantType.SINGLE_NUCLEOTIDE,
    "SNV": VariantType.SINGLE_NUCLEOTIDE,
    "MNP": VariantType.MULTI_NUCLEOTIDE,
    "MNV": VariantType.MULTI_NUCLEOTIDE,
    "DEL": VariantType.DELETION,
    "INS": VariantType.INSERTION,
    "DUP": VariantType.DUPLICATION,
    "INV": VariantType.INVERSION,
    "CNV": VariantType.COPY_NUMBER,
    "BND": VariantType.BREAKEND,
    "STR": VariantType.SHORT_TANDEM_REPEAT,
    "TRA": VariantType.TRANSLOCATION,
    "DEL:ME": VariantType.DELETION_ME,
    "DEL:ME:ALU": VariantType.DELETION_ALU,
    "DEL:ME:LINE1": VariantType.DELETION_L1,
    "DEL:ME:SVA": VariantType.DELETION_SVA,
    "DEL:ME:HERV": VariantType.DELETION_HERV,
    "INS:ME": VariantType.INSERTION_ME,
    "INS:ME:ALU": VariantType.INSERTION_ALU,
    "INS:ME:LINE1": VariantType.INSERTION_L1,
    "INS:ME:SVA": VariantType.INSERTION_SVA,
    "INS:ME:HERV": VariantType.INSERTION_HERV,
    "DUP:TANDEM": VariantType.DUPLICATION_TANDEM,
    "DUP:INV-BEFORE": VariantType.DUPLICATION_INVERSION_BEFORE,
    "DUP:INV-AFTER": VariantType.DUPLICATION_INVERSION_AFTER,
    "CNV:GAIN": VariantType.COPY_NUMBER_GAIN,
    "CNV:LOSS": VariantType.COPY_NUMBER_LOSS,
}

# Checked in order once an exact match has failed.
_VCF_PREFIXES: tuple[tuple[str, VariantType], ...] = (
    ("DEL:ME", VariantType.DELETION_ME),
    ("DEL", VariantType.DELETION),
    ("INS:ME", VariantType.INSERTION_ME),
    ("DUP:TANDEM", VariantType.DUPLICATION_TANDEM),
    ("DUP", VariantType.DUPLICATION),
    ("CNV", VariantType.COPY_NUMBER),
    ("STR", VariantType.SHORT_TANDEM_REPEAT),
)
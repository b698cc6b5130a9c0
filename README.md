# svart

A small library for representing genomic variants and regions: contigs,
genome builds, strands, stranded genomic regions, VCF-style variant types
and coordinate systems. It has no dependencies outside the standard library.

## Installation

```
pip install svart
```

## Errors

Every error the package raises derives from `svart.errors.SvartError`.
Rejected values raise `svart.errors.IllegalValueError`, which is also a
`ValueError`; its text reads `Illegal value error: <cause>`.

## Regions

`svart.region.Region` is a frozen, ordered start/end pair. Creating one whose
start lies past its end raises `IllegalValueError`.

```python
from svart.region import Region

region = Region(1, 5)
other = Region(2, 6)

region.coordinates()     # (1, 5)
region.span()            # 4
region.overlaps(other)   # True
region.contains(other)   # False
region.is_empty()        # False
```

The functions `is_empty`, `overlaps` and `contains` in `svart.ops` work on
bare coordinates. Two empty intervals overlap only when they sit at the same
position. Any class that derives from `svart.ops.Located` and has `start` and
`end` attributes gets `coordinates`, `contains`, `overlaps`, `span` and
`is_empty`.

## Strands

```python
from svart.strand import Strand

Strand.parse("+")          # Strand.FORWARD
Strand.parse("negative")   # Strand.REVERSE
str(Strand.FORWARD)        # "+"
Strand.FORWARD.opposite()  # Strand.REVERSE
```

`Strand.parse` accepts `+`, `-`, and, in any case, `pos`, `positive`, `fwd`,
`forward`, `neg`, `negative`, `rev` and `reverse`. Anything else raises
`IllegalValueError`. `FORWARD` sorts before `REVERSE`.

## Contigs and genome builds

```python
from svart.contig import AssignedMoleculeType, Contig, SequenceRole
from svart.genome import GenomeBuild, GenomeBuildIdentifier

chr1 = Contig(
    "1",
    SequenceRole.ASSEMBLED_MOLECULE,
    "1",
    AssignedMoleculeType.CHROMOSOME,
    249_250_621,
    "CM000663.1",
    "NC_000001.10",
    "chr1",
)

build = GenomeBuild(GenomeBuildIdentifier("GRCh38", "p13"), [chr1])
build.contig_from_ucsc("chr1")           # chr1
build.contig_from_refseq("NC_000001.10") # chr1
build.contig_from_genbank("CM000663.1")  # chr1
build.contig_from_ucsc("chrZ")           # None
```

A contig spans from `0` to its length (`chr1.length`); a negative length
raises `IllegalValueError`. Contigs compare equal, sort and hash by all of
their fields. A `GenomeBuild` keeps its contigs as a tuple sorted by name; the
`contig_from_*` lookups match either the contig name or the named accession.

`SequenceRole.parse` and `AssignedMoleculeType.parse` read the names used in
assembly reports (such as `assembled-molecule` or `linkage group`),
case-insensitively, and return the `UNKNOWN` member for anything they do not
recognise.

## Genomic regions

A `svart.genomic_region.GenomicRegion` sits on a contig and a strand. Its
start must not pass its end, and its end must lie within the contig; otherwise
`IllegalValueError` is raised. Containment and overlap are false for regions
on different contigs; a region on the other strand is first moved onto this
region's strand.

```python
from svart.genomic_region import GenomicRegion
from svart.strand import Strand

a = GenomicRegion(chr1, 10, 20, Strand.FORWARD)
b = GenomicRegion(chr1, 15, 20, Strand.FORWARD)

a.contains(b)                       # True
a.overlaps(b)                       # True
a.start_on_strand(Strand.REVERSE)   # contig length minus 20
a.end_on_strand(Strand.REVERSE)     # contig length minus 10
```

## Variant types

```python
from svart.variant_type import VariantType

VariantType.parse_type("A", "T")            # VariantType.SINGLE_NUCLEOTIDE
VariantType.parse_type("AT", "GC")          # VariantType.MULTI_NUCLEOTIDE
VariantType.parse_type("A", "AT")           # VariantType.INSERTION
VariantType.parse_type("AT", "A")           # VariantType.DELETION
VariantType.parse_type_vcf("<DEL:ME:ALU>")  # VariantType.DELETION_ALU
VariantType.parse_type_vcf("<DUP:FOO>")     # VariantType.DUPLICATION
VariantType.is_breakend("G]17:198982]")     # True
VariantType.is_missing(".")                 # True
```

`parse_type` hands symbolic alleles to `parse_type_vcf`, which matches known
symbolic names first, then known prefixes, and otherwise returns `SYMBOLIC`
or `UNKNOWN`. The `require_non_symbolic`, `require_symbolic`,
`require_breakend` and `require_non_breakend` helpers return the allele
unchanged when it has the required kind and raise `IllegalValueError`
otherwise.

## Coordinate systems and confidence intervals

`svart.coordinates` describes coordinate systems by whether each end is open
or closed, and confidence intervals around imprecise positions.

```python
from svart.coordinates import Bound, ConfidenceInterval, CoordinateSystem

CoordinateSystem.zero_based()                   # CoordinateSystem.LEFT_OPEN
CoordinateSystem.one_based()                    # CoordinateSystem.FULLY_CLOSED
CoordinateSystem.LEFT_OPEN.start_bound()        # Bound.OPEN
CoordinateSystem.LEFT_OPEN.start_delta(CoordinateSystem.FULLY_CLOSED)  # 1

ci = ConfidenceInterval.imprecise(upper_bound=5, lower_bound=3)
ci.is_precise()     # False
ci.to_precise()     # now precise, in place
```

Confidence interval bounds must not be negative. 
`ConfidenceInterval.swap_and_invert(left, right)` swaps the bounds of both
intervals and exchanges the two intervals, in place.

## What it does not do

The package models values only. It does not read or write VCF files or
assembly reports, ships no built-in genome builds, and has no command-line
interface.

## Running the tests

```
pip install -e ".[test]"
pytest
```
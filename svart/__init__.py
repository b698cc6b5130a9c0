"""Genomic variants, regions, contigs, genome builds, strands and coordinate systems."""

__version__ = "0.1.5"
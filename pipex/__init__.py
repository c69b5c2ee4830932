"""Run command pipelines between an input file or here-document and an output file."""

__version__ = "1.0.0"
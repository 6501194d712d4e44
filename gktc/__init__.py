"""Triangle counting for undirected graphs stored in METIS or TSV files."""

__version__ = "0.1.0"
__all__ = ["__version__"]
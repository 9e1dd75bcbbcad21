"""General-purpose helpers: strings, formatting, unicode, paths, random numbers, sorting, profiling, vector arithmetic and file I/O."""

__version__ = "0.1.0"
"""Split paged RTF reports into smaller files of a fixed number of pages."""

__version__ = "0.1.0"
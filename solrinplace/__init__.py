"""Build Solr JSON update batches from CSV data, preferring in-place updates."""

__version__ = "0.1.0"
"""Encodings, compression codecs, metadata and value helpers of the Parquet file format."""

__version__ = "0.1.0"
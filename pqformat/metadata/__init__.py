"""Parquet schema descriptors, row-group and file metadata, and column orders."""
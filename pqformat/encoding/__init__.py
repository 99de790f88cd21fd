"""Parquet value and level encodings: varints, bit-packing, RLE hybrid, delta and plain."""
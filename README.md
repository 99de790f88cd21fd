# pqformat

Pure-Python building blocks of the Parquet columnar file format.

- **Encodings** (`pqformat.encoding`):
  - `uleb128` and `zigzag_leb128`: unsigned and zig-zag variable-length integers
    (`encode`, `decode`).
  - `bitpacking`: bit-packing of `u32` values in blocks of 32 (`encode`,
    `encode_pack`, `Decoder`).
  - `hybrid_rle`: the RLE / bit-packing hybrid (`encode_bool`, `encode_u32`,
    `Decoder` yielding `Bitpacked` and `Rle` runs) and LSB-first bitmaps
    (`iter_bitmap`, `bitpacked_encode`, `set_bit`).
  - `delta_bitpacked`: `DELTA_BINARY_PACKED` of 32-bit integers (`encode`,
    `Decoder` with `consumed_bytes()`).
  - `delta_length_byte_array`: `DELTA_LENGTH_BYTE_ARRAY` (`encode`, `Decoder`
    with `into_values()`).
  - `delta_byte_array`: decoding of `DELTA_BYTE_ARRAY` (`Decoder` with
    `into_lengths()`).
  - `plain_byte_array`: decoding of plain, length-prefixed byte arrays.
  - `common`: `get_length` and `ceil8`.
- **Compression** (`pqformat.compression`): the `CompressionCodec` enum and
  `create_codec`, which returns a `SnappyCodec`, `GZipCodec`, `BrotliCodec`,
  `Lz4Codec` or `ZstdCodec`. Snappy (raw, unframed) is implemented in pure
  Python; the other codecs use `gzip`/`zlib`, `brotli`, `lz4.frame` and
  `zstandard`.
- **Metadata** (`pqformat.metadata`):
  - `schema`: `Repetition`, `PrimitiveType`, `GroupType`, `ColumnDescriptor`
    and `SchemaDescriptor`, which computes every leaf column's maximum
    definition and repetition levels and path.
  - `row_group`: column-chunk and row-group metadata (`ColumnChunk`,
    `ColumnMetaData`, `RowGroup`, `ColumnChunkMetaData`, `RowGroupMetaData`).
  - `file_metadata`: `FileMetaData` and `KeyValue`, plus the `PARQUET_MAGIC`,
    `FOOTER_SIZE` and `DEFAULT_FOOTER_READ_SIZE` constants.
  - `column_order`: `SortOrder` and `ColumnOrder`.
- **Values** (`pqformat.values`): `values_def` pairs decoded values with
  definition levels, `read_bitmap`/`get_bit`/`is_set` read plain-encoded
  booleans, and `unzip_option` splits optional values into plain values and
  length-prefixed definition levels.

Errors are raised as `pqformat.errors.ParquetError` or its subclasses
`OutOfSpecError` and `ExternalError`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

Variable-length integers:

```python
from pqformat.encoding import uleb128, zigzag_leb128

value, consumed = uleb128.decode(bytes([0xE5, 0x8E, 0x26, 0xDE]))
assert (value, consumed) == (624_485, 3)

value, consumed = zigzag_leb128.decode(bytes([3]))
assert value == -2
```

Bit-packed values and hybrid runs:

```python
from pqformat.encoding import bitpacking, hybrid_rle

data = bytes([0b10001000, 0b11000110, 0b11111010])
assert list(bitpacking.Decoder(data, 3, 8)) == [0, 1, 2, 3, 4, 5, 6, 7]

encoded = hybrid_rle.encode_bool([True] * 8)
assert encoded == bytes([3, 0xFF])
assert list(hybrid_rle.Decoder(encoded, 1)) == [hybrid_rle.Bitpacked(b"\xff")]
```

Delta-encoded integers and byte arrays:

```python
from pqformat.encoding import delta_bitpacked, delta_length_byte_array

encoded = delta_bitpacked.encode([1, 3, -1, 2, 3])
assert list(delta_bitpacked.Decoder(encoded)) == [1, 3, -1, 2, 3]

encoded = delta_length_byte_array.encode([b"aa", b"bbb", b"a"])
decoder = delta_length_byte_array.Decoder(encoded)
assert list(decoder) == [2, 3, 1]
assert decoder.into_values() == b"aabbba"
```

Compression:

```python
from pqformat.compression import CompressionCodec, create_codec

codec = create_codec(CompressionCodec.GZIP)
payload = bytes(range(100))
assert codec.decompress(codec.compress(payload), len(payload)) == payload
```

`create_codec` returns `None` for `UNCOMPRESSED` and raises `ParquetError`
for `LZO`, which has no codec.

Schema levels:

```python
from pqformat.metadata.schema import GroupType, PrimitiveType, Repetition, SchemaDescriptor

schema = SchemaDescriptor("schema", [
    PrimitiveType("id", "INT64", Repetition.REQUIRED),
    GroupType("tags", [PrimitiveType("item", "BYTE_ARRAY")], Repetition.REPEATED),
])
item = schema.column(1)
assert (item.max_def_level, item.max_rep_level) == (2, 1)
assert item.path_in_schema == ("tags", "item")
```

Optional values and plain booleans:

```python
from pqformat.values import read_bitmap, values_def

assert list(values_def([10, 20], [1, 0, 1], 1)) == [10, None, 20]
assert read_bitmap(bytes([0b101]), 3) == [True, False, True]
```

## What this package does not do

It provides the encodings, codecs and metadata structures, but does not read
or write whole Parquet files: there is no footer or Thrift parsing, no page
reader or writer, no statistics decoding and no command-line tool.
# wake

Building blocks for a streaming, message-passing query engine: typed values,
table schemas, data blocks and messages, and the bounded channels that carry
messages between execution nodes. The package uses only the standard library.

## Modules

- `wake.data_type`: `DataType` and `DataCell`. A cell is built with
  `DataCell.of(value)`, `DataCell.null()`, or parsed from text or UTF-8 bytes
  with `DataCell.parse(text, dtype)` / `DataCell.parse_bytes(data, dtype)`
  (empty input gives a null cell). Integer and float cells support `+`, `-`,
  `*` and `/` (division always gives a float; integer results are checked
  against the 32-bit range). Cells compare with each other and with plain
  numbers and strings. Aggregates: `DataCell.sum`, `min`, `max`, `count`
  (non-null cells) and `avg` (a `(sum, count)` tuple cell). `hash_value()` and
  `DataCell.vector_hash(cells)` give stable 64-bit hashes; float cells do not
  contribute to them.
- `wake.schema`: `Column` (`from_field`, `from_key_field`) and `Schema` with
  `index`, `dtype`, `get_column`, `get_column_from_index`, `keys` and
  `col_count`. `Schema.from_columns` builds an unnamed schema and
  `Schema.from_example` returns the sample schemas `lineitem`, `orders` and
  `test_arraydata`. Unknown tables and column names raise `SchemaError`.
- `wake.meta_type`: the reserved metadata keys (`SCHEMA_META_NAME`,
  `DATABLOCK_TYPE`, `DATABLOCK_CARDINALITY`, `DATABLOCK_TOTAL_RECORDS`) and
  `meta_map` / `dm_meta_map`, which build block metadata around a schema, and
  `to_schema`.
- `wake.payload`: `DataBlock` (data plus a metadata dict; `schema()` reads the
  schema from the metadata), `Signal.STOP` and the end-of-stream marker `EOF`.
- `wake.message`: `DataMessage`, with `from_data`, `eof`, `stop`, `is_eof`,
  `is_present` and `datablock`.
- `wake.kv`: `KeyValue` and `KeyValueList`.
- `wake.array_row`: `ArrayRow`, an indexable, iterable row of cells.
- `wake.channel`: `create_channel()` returns a bounded writer/reader pair.
  `ChannelReader.read()` blocks, `try_read()` returns `None` when nothing is
  waiting; after `ChannelWriter.close()` the reader drains what is left and
  then gets `ChannelClosed`. `MultiChannelReader` reads from one of several
  readers by position; `MultiChannelBroadcaster` sends every message to all
  of its writers.
- `wake.tpch`: TPC-H table schemas with key columns (`tpch_schema`), expected
  row counts per scale (`total_number_of_records`) and input-file discovery
  (`load_tables`, giving a `TableInput` per table).

## Install

```
pip install .
```

Add the `test` extra to run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from wake.data_type import DataCell
from wake.channel import create_channel
from wake.message import DataMessage

total = DataCell.sum([DataCell.of(1), DataCell.of(2), DataCell.of(3)])
assert total == 6

writer, reader = create_channel()
writer.write(DataMessage.from_data([1, 2, 3]))
writer.write(DataMessage.eof())
message = reader.read()
print(message.datablock().data)
assert reader.read().is_eof()
```

TPC-H input files are found by table name (`<table>.tbl*`) and sorted by
partition number:

```python
from wake.tpch import load_tables, tpch_schema

tables = load_tables("data/scale=1/partition=10", 1)
print(tables["lineitem"].input_files)
print(tpch_schema("part").index("p_type"))
```

## What it does not do

The package provides the data types and the messaging layer only. It has no
execution nodes or operators (filters, joins, group-by, accumulators), no CSV
reader, no query runner, and no command-line program: reading TPC-H files and
evaluating queries over them is left to the code that uses these pieces.
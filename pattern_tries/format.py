"""
Loading pattern tables from JSON, YAML and CSV files.

Document layout
---------------
JSON / YAML documents hold named tables, each an ordered mapping of key
pattern to value pattern::

    {"plural": {"%y": "%ies", "%s": "%ses", "%": "%s"}}

A document whose values are all strings is read as a single table named
after the file stem (or ``"default"`` when parsing raw text).

CSV files have ``key`` and ``value`` columns and an optional ``table``
column; rows without a table go to the default table. Row order is pattern
order, which decides priority between overlapping patterns.

YAML treats a leading ``%`` as a directive, so wildcard patterns must be
quoted there (``"%y": "%ies"``).
"""

from __future__ import annotations

import io
import json
import logging
import os

import pandas as pd
import yaml

from pattern_tries.paired_mapping import PairedMapping


log = logging.getLogger("pattern_tries.format")

DEFAULT_TABLE = "default"
SUPPORTED_EXTENSIONS = (".json", ".yml", ".yaml", ".csv")
CSV_COLUMNS = ("key", "value")


class FormatError(ValueError):
  """Raised when a table file cannot be turned into paired mappings."""


def load(filename):
  """Load every table in `filename`, dispatching on its extension.

  Returns:
      dict[str, PairedMapping]: Tables by name, in document order.
  """
  _extension(filename)
  with open(filename, "rb") as f:
    tables = load_buffer(filename, f.read())
  log.info("Loaded %d table(s) from %s", len(tables), filename)
  return tables


def load_buffer(filename, data):
  """Parse in-memory `data` (bytes or text) the way `load` parses `filename`.

  Only the name of `filename` is used: its extension picks the parser
  (case-insensitively) and its stem names a flat table. Uploaded files
  go through here.
  """
  stem = os.path.splitext(os.path.basename(filename))[0]
  extension = _extension(filename)
  if isinstance(data, bytes):
    data = data.decode("utf-8")

  if extension == ".csv":
    return load_csv(io.StringIO(data), name=stem)
  if extension == ".json":
    return load_json(data, name=stem)
  return load_yaml(data, name=stem)


def _extension(filename):
  extension = os.path.splitext(filename)[1].lower()
  if extension not in SUPPORTED_EXTENSIONS:
    raise FormatError(f"Cannot convert {extension or 'extensionless'} files: {filename}")
  return extension


def load_json(data, name=DEFAULT_TABLE):
  return build_tables(json.loads(data), name)


def load_yaml(data, name=DEFAULT_TABLE):
  return build_tables(yaml.safe_load(data), name)


def load_csv(source, name=DEFAULT_TABLE):
  """Read a CSV of ``key,value[,table]`` rows from a path or file-like object."""
  df = pd.read_csv(source, dtype=str, keep_default_na=False)
  missing = [c for c in CSV_COLUMNS if c not in df.columns]
  if missing:
    raise FormatError(f"CSV is missing column(s): {', '.join(missing)}")

  has_table = "table" in df.columns
  raw = {}
  for row in df.itertuples(index=False):
    table = (row.table if has_table else "") or name
    raw.setdefault(table, []).append((row.key, row.value))
  return {table: PairedMapping(pairs) for table, pairs in raw.items()}


def build_tables(document, name=DEFAULT_TABLE):
  """Turn a parsed document into ``{table name: PairedMapping}``."""
  if not isinstance(document, dict):
    raise FormatError(f"Expected a mapping at the top level, got {type(document).__name__}")

  if all(isinstance(v, str) for v in document.values()):
    document = {name: document}

  tables = {}
  for table, pairs in document.items():
    if not isinstance(pairs, dict):
      raise FormatError(f"Table {table!r} must be a mapping of patterns")
    for key, value in pairs.items():
      if not isinstance(key, str) or not isinstance(value, str):
        raise FormatError(f"Table {table!r} has a non-string entry: {key!r} -> {value!r}")
    tables[str(table)] = PairedMapping(pairs)
  return tables


def dump_table(mapping):
  """Return `mapping` as a two-column DataFrame (``key``, ``value``)."""
  return pd.DataFrame(mapping.items(), columns=list(CSV_COLUMNS))

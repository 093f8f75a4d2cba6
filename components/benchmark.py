"""
Timing harness for pattern tables.

Measures two costs:
- **build**: constructing a `PairedMapping` (both trees) from its pairs;
- **lookup**: `value_for` / `key_for` over a workload of literal strings.

Results come back as pandas DataFrames so the dashboard can chart them
directly. Per-operation figures are in microseconds.
"""

import logging
import time

import numpy as np
import pandas as pd

from components.work_loads import WorkLoad
from pattern_tries.paired_mapping import PairedMapping


log = logging.getLogger("pattern_tries.benchmark")

DIRECTIONS = ("value", "key")


def _summary(samples_us):
  a = np.asarray(samples_us, dtype=float)
  if a.size == 0:
    return {"mean_us": 0.0, "median_us": 0.0, "p95_us": 0.0}
  return {
    "mean_us": float(a.mean()),
    "median_us": float(np.median(a)),
    "p95_us": float(np.percentile(a, 95)),
  }


def time_build(pairs, repeat=5):
  """Time `repeat` constructions of a PairedMapping from `pairs`."""
  if repeat < 1:
    raise ValueError("repeat must be at least 1")
  pairs = list(pairs.items()) if hasattr(pairs, "items") else list(pairs)
  samples = []
  mapping = None
  for _ in range(repeat):
    t0 = time.perf_counter()
    mapping = PairedMapping(pairs)
    samples.append((time.perf_counter() - t0) * 1e6)
  row = {"pairs": len(pairs), "repeat": repeat}
  row.update(_summary(samples))
  row["nodes"] = mapping.forward.count_nodes() + mapping.reverse.count_nodes()
  return row


def time_lookups(mapping, words, direction="value"):
  """Time one lookup per word; returns summary stats plus the hit rate."""
  if direction not in DIRECTIONS:
    raise ValueError(f"direction must be one of {DIRECTIONS}")
  fn = mapping.value_for if direction == "value" else mapping.key_for

  samples = []
  hits = 0
  perf = time.perf_counter
  for w in words:
    t0 = perf()
    out = fn(w)
    samples.append((perf() - t0) * 1e6)
    if out is not None:
      hits += 1
  row = {"direction": direction, "words": len(samples)}
  row.update(_summary(samples))
  row["hit_rate"] = (hits / len(samples)) if samples else 0.0
  return row


def run_benchmark(mapping, sizes, s_freq=0.0, seed=None):
  """Run forward and reverse lookup timings for each workload size.

  Forward lookups use singular nouns; reverse lookups use their plurals as
  produced by `mapping` itself.

  Returns:
      pandas.DataFrame: One row per (size, direction).
  """
  load = WorkLoad(seed)
  rows = []
  for n in sizes:
    nouns = load.nouns(n, s_freq)
    plurals = load.plurals(mapping, n, s_freq)
    for direction, words in (("value", nouns), ("key", plurals)):
      row = time_lookups(mapping, words, direction)
      row["size"] = n
      rows.append(row)
    log.debug("benchmarked size %d", n)
  return pd.DataFrame(rows, columns=["size", "direction", "words", "mean_us", "median_us", "p95_us", "hit_rate"])

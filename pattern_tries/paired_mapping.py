"""
Bidirectional mapping table built from pattern pairs.

A `PairedMapping` holds an ordered list of ``(key_pattern, value_pattern)``
pairs and two independent `PrefixTree` instances: one indexed by the key
patterns, one by the value patterns. Looking up a literal on either side
substitutes the wildcard capture into the opposite pattern::

    plurals = PairedMapping({"%y": "%ies", "%s": "%ses", "%": "%s"})
    plurals.value_for("ferry")   # "ferries"
    plurals.key_for("buses")     # "bus"

Pairs are inserted in the order given, and that order decides which pattern
wins when several could match (see `prefix_tree`). List specific patterns
before catch-alls.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping

from pattern_tries.prefix_tree import WILDCARD, PrefixTree


log = logging.getLogger("pattern_tries")


class PairedMapping:
  __slots__ = ("pairs", "forward", "reverse", "wildcard")

  def __init__(self, pairs: Mapping[str, str] | Iterable[tuple[str, str]], wildcard: str = WILDCARD):
    if isinstance(pairs, Mapping):
      pairs = pairs.items()
    self.pairs: list[tuple[str, str]] = [(str(k), str(v)) for k, v in pairs]
    self.wildcard = wildcard
    self.forward = PrefixTree(wildcard)
    self.reverse = PrefixTree(wildcard)

    for i, (key, value) in enumerate(self.pairs):
      self.forward.insert(key, i)
      self.reverse.insert(value, i)
    log.debug("built paired mapping with %d pairs", len(self.pairs))


  @classmethod
  def parse(cls, pairs, wildcard=WILDCARD):
    """Build a mapping from a dict literal or an iterable of pairs."""
    return cls(pairs, wildcard=wildcard)


  def _substitute(self, pattern, captured):
    if self.wildcard in pattern:
      return pattern.replace(self.wildcard, captured or "", 1)
    return pattern


  def value_for(self, key: str) -> str | None:
    """Return the value for the literal `key`, or None when nothing matches."""
    match = self.forward.lookup(key)
    if match is None:
      return None
    return self._substitute(self.pairs[match.index][1], match.captured)


  def key_for(self, value: str) -> str | None:
    """Return the key for the literal `value`, or None when nothing matches."""
    match = self.reverse.lookup(value)
    if match is None:
      return None
    return self._substitute(self.pairs[match.index][0], match.captured)


  def values_for(self, keys):
    return [self.value_for(k) for k in keys]


  def keys_for(self, values):
    return [self.key_for(v) for v in values]


  def items(self):
    return list(self.pairs)


  def __len__(self):
    return len(self.pairs)


  def __iter__(self) -> Iterator[str]:
    return (key for key, _ in self.pairs)


  def __contains__(self, key):
    return isinstance(key, str) and self.forward.lookup(key) is not None


  def __repr__(self):
    return f"PairedMapping({dict(self.pairs)!r})"

"""
Output modifiers applied to mapped strings.

Transforms are looked up by name in an explicit registry. Unknown names fall
back to the identity transform, so a template asking for an unsupported
modifier still renders its raw value.
"""

from __future__ import annotations

import logging
from typing import Callable


log = logging.getLogger("pattern_tries.modifiers")


def identity(value: str) -> str:
  return value


class Modifiers:
  """Registry mapping modifier names to ``str -> str`` functions."""

  def __init__(self, transforms: dict[str, Callable[[str], str]] | None = None):
    self.transforms = dict(DEFAULT_TRANSFORMS)
    if transforms:
      self.transforms.update(transforms)


  def register(self, name, fn=None):
    """Register `fn` under `name`; usable as a decorator when `fn` is omitted."""
    if fn is None:
      def decorator(f):
        self.transforms[name] = f
        return f
      return decorator
    self.transforms[name] = fn
    return fn


  def get(self, name):
    return self.transforms.get(name, identity)


  def transform(self, name, value):
    """Apply the modifier `name` to `value`, or return `value` unchanged."""
    fn = self.transforms.get(name)
    if fn is None:
      log.debug("unknown modifier %r, returning value unchanged", name)
      return value
    return fn(value)


  def __contains__(self, name):
    return name in self.transforms


DEFAULT_TRANSFORMS = {
  "upper": str.upper,
  "lower": str.lower,
  "capitalize": str.capitalize,
  "title": str.title,
  "swapcase": str.swapcase,
  "strip": str.strip,
  "identity": identity,
}

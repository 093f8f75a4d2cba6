"""
Prefix tree (radix trie) with single-wildcard capture patterns.

This module implements a compressed prefix tree whose keys are *patterns*
rather than plain words. A pattern is a literal string that may contain at
most one wildcard marker (`WILDCARD`, default ``"%"``). Edges carry string
labels (Patricia-style), and the wildcard is stored as its own edge flagged
``wildcard=True`` so that lookup can treat it specially.

Supported pattern shapes
------------------------
- ``"literal"``
- ``"%literal"``    leading wildcard (``"%es"`` matches ``"buses"``)
- ``"literal%"``    trailing wildcard (``"te%"`` matches ``"team"``)
- ``"lit%eral"``    embedded wildcard (``"te%s"`` matches ``"tests"``)
- ``"%"``           catch-all, matches any non-empty string

Classes
-------
PrefixNode
    Holds an ordered `edges` list and an optional terminal `index`.
PrefixEdge
    Owns one child `node`; carries a `label` and a `wildcard` flag.
PrefixMatch
    Result of a successful lookup: the query, the terminal index and the
    substring captured by the wildcard (or ``None``).
PrefixTree
    Public API: `insert`, `add_all`, `lookup`, `common_prefix`, `count_nodes`.

Ordering contract
-----------------
Edges are scanned in insertion order and the first qualifying edge wins;
lookup never backtracks. When several wildcard patterns overlap, the more
specific ones must be inserted first::

    tree.insert("%y", 0)   # ferry -> 0
    tree.insert("%s", 1)   # bus   -> 1
    tree.insert("%", 2)    # car   -> 2

Inserting ``"%"`` before ``"%y"`` would make ``"%"`` unreachable for inputs
that do not end in ``y``.

Conventions & invariants
------------------------
- **Build once, read many:** nodes and edges are only created by `insert`;
  `lookup` never mutates the tree, so lookups are safe to share across threads
  once construction is finished.
- **Edge labels** are non-empty, except for the *end anchor*: an empty literal
  edge under a wildcard's child node, which lets a bare wildcard coexist with
  more specific suffixes (``"%"`` after ``"%y"``).
- **Wildcard continuations:** the literal that follows a wildcard is stored
  whole under the wildcard's child node, one edge per pattern, in insertion
  order. Those edges are lookahead candidates and are never prefix-split.
  A wildcard's child node carries either an index (catch-all) or
  continuation edges, never both.
- **Duplicates:** re-inserting an identical pattern keeps the first index
  and logs a warning on the ``pattern_tries`` logger.
"""

import logging


log = logging.getLogger("pattern_tries")

WILDCARD = "%"


class PatternError(ValueError):
  """Raised when a pattern cannot be inserted into a PrefixTree."""


class PrefixNode:
  __slots__ = ("edges", "index")

  def __init__(self, index=None):
    self.edges = []
    self.index = index

  def __repr__(self):
    return f"PrefixNode(index={self.index!r}, edges={len(self.edges)})"


class PrefixEdge:
  __slots__ = ("node", "label", "wildcard")

  def __init__(self, node, label, wildcard=False):
    self.node = node
    self.label = label
    self.wildcard = wildcard

  def __repr__(self):
    flag = ", wildcard" if self.wildcard else ""
    return f"PrefixEdge({self.label!r}{flag})"


class PrefixMatch:
  __slots__ = ("label", "index", "captured")

  def __init__(self, label, index, captured=None):
    self.label = label
    self.index = index
    self.captured = captured

  def __eq__(self, other):
    if not isinstance(other, PrefixMatch):
      return NotImplemented
    return (self.label, self.index, self.captured) == (other.label, other.index, other.captured)

  def __repr__(self):
    return f"PrefixMatch({self.label!r}, index={self.index!r}, captured={self.captured!r})"


def split_pattern(pattern, wildcard=WILDCARD):
  """Split `pattern` into its literal and wildcard parts.

  Returns one of ``[lit]``, ``[%]``, ``[%, lit]``, ``[lit, %]`` or
  ``[lit, %, lit]``. Raises `PatternError` for empty patterns and for
  patterns holding more than one wildcard marker.
  """
  if not pattern:
    raise PatternError("Empty pattern")
  if pattern.count(wildcard) > 1:
    raise PatternError(f"Too many capture patterns: {pattern!r}")

  head, sep, tail = pattern.partition(wildcard)
  return [part for part in (head, sep, tail) if part]


#### ===================================================  ####
#    Prefix Tree with wildcard-aware traversal
#### ===================================================  ####

class PrefixTree:
  __slots__ = ("root", "wildcard")

  def __init__(self, wildcard=WILDCARD):
    self.root = PrefixNode()
    self.wildcard = wildcard


  @staticmethod
  def common_prefix(a, b):
    """Return the longest string that is a prefix of both `a` and `b`."""
    i = 0
    n = min(len(a), len(b))
    while i < n and a[i] == b[i]:
      i += 1
    return a[:i]


  def insert(self, pattern, index):
    """Insert `pattern` so that a later lookup resolves to `index`.

    - Splits the pattern into at most three parts around the wildcard marker.
    - For each literal part before the wildcard, scans the cursor node's edges
      (in insertion order) for the first one sharing a non-empty prefix:
      * none → appends a new edge for the part and descends into it;
      * the whole edge label is shared → descends through the edge and keeps
        inserting the unconsumed remainder at its target node;
      * only part of the label is shared → splits the edge in place: the
        shared prefix moves to a new intermediate node, the old tail hangs
        under it, and the new tail (if any) is added beside the old tail.
    - The wildcard part reuses the node's wildcard edge when there is one; the
      literal after it becomes a whole continuation edge (`_insert_suffix`).
    - Only the node reached by the last part carries `index`; an identical
      pattern inserted twice keeps its first index and logs a warning.

    Args:
        pattern (str): Pattern with at most one wildcard marker.
        index (int): Value reported by `lookup` for inputs matching `pattern`.

    Raises:
        PatternError: If the pattern is empty or has several wildcard markers.
          The tree is untouched in that case.
    """
    parts = split_pattern(pattern, self.wildcard)
    last = len(parts) - 1
    node = self.root
    after_wildcard = False

    for i, part in enumerate(parts):
      if part == self.wildcard:
        node = self._insert_wildcard(node, i == last)
        after_wildcard = True
      elif after_wildcard:
        node = self._insert_suffix(node, part)
      else:
        node = self._insert_literal(node, part)

    if node.index is not None:
      log.warning("duplicate pattern %r ignored (keeps index %r)", pattern, node.index)
      return
    node.index = index
    log.debug("inserted %r at index %r", pattern, index)


  def _insert_wildcard(self, node, last):
    for edge in node.edges:
      if edge.wildcard:
        child = edge.node
        break
    else:
      child = PrefixNode()
      node.edges.append(PrefixEdge(child, self.wildcard, wildcard=True))

    if last and child.edges:
      # Bare wildcard after more specific suffixes: anchor it at the end.
      return self._insert_suffix(child, "")
    return child


  @staticmethod
  def _insert_suffix(child, suffix):
    """Add a literal continuation under a wildcard's child node.

    Continuations are kept whole (never prefix-split) and in insertion order:
    lookup tries each one as a lookahead candidate, so ``"%ses"`` and ``"%s"``
    must stay distinct edges. A catch-all index already sitting on `child` is
    moved to an empty end-anchor edge so that it keeps its priority.
    """
    if child.index is not None:
      child.edges.append(PrefixEdge(PrefixNode(child.index), ""))
      child.index = None
    for edge in child.edges:
      if edge.label == suffix:
        return edge.node
    end = PrefixNode()
    child.edges.append(PrefixEdge(end, suffix))
    return end


  def _insert_literal(self, node, part):
    lcp = self.common_prefix

    while part:
      for j, edge in enumerate(node.edges):
        if edge.wildcard or not edge.label:
          continue
        shared = lcp(edge.label, part)
        if shared:
          break
      else:
        child = PrefixNode()
        node.edges.append(PrefixEdge(child, part))
        return child

      n = len(shared)
      if n == len(edge.label):
        part = part[n:]
        node = edge.node
        continue

      edge.label = edge.label[n:]
      mid = PrefixNode()
      mid.edges.append(edge)
      node.edges[j] = PrefixEdge(mid, shared)
      new = part[n:]
      if not new:
        return mid
      child = PrefixNode()
      mid.edges.append(PrefixEdge(child, new))
      return child

    return node


  def add_all(self, patterns):
    """Insert every pattern of `patterns`, using its position as the index."""
    for i, pattern in enumerate(patterns):
      self.insert(pattern, i)


  def lookup(self, label):
    """Match the literal string `label` against the inserted patterns.

    Traversal keeps two pieces of state: `consumed`, the number of characters
    of `label` matched so far, and `captured`, the text taken by a wildcard.
    At each node the edges are tried in insertion order and the first one that
    qualifies is followed; there is no backtracking.

    - A literal edge qualifies when its label is a prefix of the remainder.
    - A wildcard edge whose child has no edges swallows the whole remainder.
    - A wildcard edge whose child has edges looks ahead: for each continuation
      edge (in order) it searches the **rightmost** occurrence of the
      continuation label in the remainder. The first continuation found wins;
      the wildcard captures everything before it and traversal resumes below
      the continuation. Rightmost search makes the capture greedy, so
      ``"te%s"`` matches ``"tests"`` rather than stopping at ``"tes"``.

    Returns:
        PrefixMatch | None: A match when traversal ends on a node carrying an
        index with every character consumed; otherwise ``None``.
    """
    node = self.root
    consumed = 0
    captured = None
    length = len(label)

    while node is not None and node.edges and consumed < length:
      rest = label[consumed:]
      nxt = None

      for edge in node.edges:
        if not edge.wildcard:
          if rest.startswith(edge.label):
            consumed += len(edge.label)
            nxt = edge.node
            break
          continue

        if not edge.node.edges:
          captured = rest
          consumed = length
          nxt = edge.node
          break

        for ahead in edge.node.edges:
          at = rest.rfind(ahead.label)
          if at != -1:
            captured = rest[:at]
            consumed += at + len(ahead.label)
            nxt = ahead.node
            break
        if nxt is not None:
          break

      node = nxt

    if node is not None and node.index is not None and consumed == length:
      return PrefixMatch(label, node.index, captured)
    return None


  def count_nodes(self, get_avg_branch_factor=False):
    """Return total node count, or average branching factor over internal nodes."""
    total_nodes = 0
    internal = 0
    total_deg = 0

    stack = [self.root]
    while stack:
      node = stack.pop()
      total_nodes += 1
      deg = len(node.edges)
      if deg:
        total_deg += deg
        internal += 1
        stack.extend(edge.node for edge in node.edges)
    if get_avg_branch_factor:
      return (total_deg / internal) if internal else 0.0
    return total_nodes

"""Pattern tries: wildcard prefix trees and bidirectional mapping tables."""

from pattern_tries.prefix_tree import WILDCARD, PatternError, PrefixEdge, PrefixMatch, PrefixNode, PrefixTree
from pattern_tries.paired_mapping import PairedMapping
from pattern_tries.modifiers import Modifiers
from pattern_tries.tables import DEFAULT_PLURALS, IRREGULAR_PLURALS

__all__ = [
    "DEFAULT_PLURALS",
    "IRREGULAR_PLURALS",
    "WILDCARD",
    "Modifiers",
    "PairedMapping",
    "PatternError",
    "PrefixEdge",
    "PrefixMatch",
    "PrefixNode",
    "PrefixTree",
]

#!/usr/bin/env python3
from components.noun_generator import generate_random_nouns, gen_nouns_with_suffix_freq


class WorkLoad:
  def __init__(self, seed=None):
    self.seed = seed

  def nouns(self, num_words, s_freq=0, unique=False):
    if s_freq > 0:
      return gen_nouns_with_suffix_freq(num_words, s_freq, self.seed)
    else:
      return generate_random_nouns(num_words, self.seed, unique)

  def plurals(self, mapping, num_words, s_freq=0):
    """Inflect a noun workload through `mapping`, dropping unmatched nouns."""
    out = []
    for noun in self.nouns(num_words, s_freq):
      plural = mapping.value_for(noun)
      if plural is not None:
        out.append(plural)
    return out

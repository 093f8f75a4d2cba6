import math
import random
from collections import defaultdict


# An inflecting suffix sits before the last letter, so DEFAULT_PLURALS finds
# no plural for these. They keep workload hit rates honest.
MID_WORD_NOUNS = ["horse", "house", "keyboard", "sheep", "student", "taxi", "yard"]

NOUNS = MID_WORD_NOUNS + [
  # plain (no y, s, x, ch or sh anywhere, so only the catch-all applies)
  "actor", "apple", "book", "boot", "bottle", "car", "cat", "cloud", "coin",
  "door", "dream", "drum", "engine", "field", "flag", "garage", "garden",
  "hand", "hat", "hotel", "jacket", "kite", "lake", "lamp", "letter",
  "market", "mountain", "needle", "ocean", "orange", "painter", "pebble",
  "pencil", "pillow", "planet", "poem", "river", "road", "rock", "table",
  "tiger", "train", "tree", "tunnel", "violin", "wagon", "window", "word",
  # -y
  "army", "baby", "berry", "city", "country", "daisy", "ferry", "fly",
  "lady", "party", "penny", "puppy", "story", "study", "theory",
  # -ay / -ey / -oy
  "bay", "day", "essay", "holiday", "ray", "tray", "donkey", "key",
  "monkey", "turkey", "valley", "boy", "cowboy", "convoy", "toy",
  # -s
  "bus", "campus", "class", "dress", "gas", "glass", "kiss", "lens",
  "plus", "virus",
  # -x
  "box", "fax", "fox", "mix", "tax", "wax",
  # -ch / -sh
  "beach", "bench", "church", "coach", "lunch", "match", "watch",
  "brush", "bush", "crash", "dish", "flash", "wish",
]

SUFFIXES = ("y", "s", "x", "ch", "sh")

## Bucket nouns by the inflection suffix they exercise so workloads can be
## biased toward wildcard specialisations instead of the catch-all.
suffix_bucket = defaultdict(list)
for noun in NOUNS:
  for suffix in SUFFIXES:
    if noun.endswith(suffix):
      suffix_bucket[suffix].append(noun)
      break
  else:
    suffix_bucket[""].append(noun)
suffixes = list(suffix_bucket.keys())
suffix_weights = [len(suffix_bucket[s]) for s in suffixes]


def generate_random_nouns(num_words, seed=None, unique=False):
  """Draw singular nouns uniformly from NOUNS, ignoring their suffix buckets.

  Repeats are allowed unless `unique` is set, in which case each noun shows up
  at most once and `num_words` cannot exceed the size of the noun list.
  """
  word_list = NOUNS
  if num_words < 1 or (unique is True and num_words > len(word_list)):
    raise ValueError(f"num_words must be between 1 and {len(word_list)}")
  rng = random.Random(seed)
  if unique:
    return rng.sample(word_list, num_words)
  return rng.choices(word_list, k=num_words)


def gen_nouns_with_suffix_freq(num_words, suffix_freq=0.0, seed=None):
  """Generates a list of nouns where a share of them carry an inflecting suffix.
  A higher suffix_freq means more nouns hit the specific wildcard patterns
  (-y, -s, -x, -ch, -sh) rather than the catch-all.
  Suffix frequency is applied logarithmically
  suffix_freq: 0 -> 0.999...
  """
  def _p_eff_log(x, max_mean=100) -> float:
    # Logarithmic mapping of suffix frequency to effective suffix frequency
    if x < 0 or x > 1:
      raise ValueError("Suffix frequency must be between 0 and 1")
    x = max(0.0, min(0.999999, x))
    k = math.log(max_mean)
    p = 1.0 - math.exp(-k * x)
    return min(p, 0.999999)

  if num_words < 1:
    raise ValueError("num_words must be at least 1")
  p = _p_eff_log(suffix_freq)
  rng = random.Random(seed)

  specific = [s for s in suffixes if s]
  weights = [len(suffix_bucket[s]) for s in specific]
  out = []
  while len(out) < num_words:
    if rng.random() < p:
      suffix = rng.choices(specific, weights=weights)[0]
    else:
      suffix = rng.choices(suffixes, weights=suffix_weights)[0]
    out.append(rng.choice(suffix_bucket[suffix]))
  return out

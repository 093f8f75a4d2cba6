"""Built-in pattern tables."""

# Specific suffixes first: the bare "%" catch-all must stay last.
#
# Lookup takes the first suffix (in this order) found anywhere in the word and
# does not fall back when that occurrence is not at the end. Nouns holding one
# of these suffixes before their last letter get no plural at all:
# "house" and "horse" stop at "s", "yard" at "y", "keyboard" at "ey", "taxi"
# at "x", "sheep" at "sh". Map such nouns in a literal table.
DEFAULT_PLURALS = {
  "%ay": "%ays",
  "%ey": "%eys",
  "%oy": "%oys",
  "%y": "%ies",
  "%ch": "%ches",
  "%sh": "%shes",
  "%x": "%xes",
  "%s": "%ses",
  "%": "%s",
}

# Literal tables are kept apart from wildcard ones: a literal edge sharing a
# first letter with the input is followed without falling back to "%".
IRREGULAR_PLURALS = {
  "child": "children",
  "foot": "feet",
  "goose": "geese",
  "man": "men",
  "mouse": "mice",
  "person": "people",
  "tooth": "teeth",
  "woman": "women",
}

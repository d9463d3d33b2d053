"""Pluralize / singularize / capitalize resource words.

Phrases joined by underscores or spaces inflect only their last word:
  singularize("issue_labels") -> "issue_label"
  pluralize("release asset")  -> "release assets"
"""

from __future__ import annotations

# Known plural/singular mappings for GitHub resources
_PLURALS: dict[str, str] = {
    "repo": "repos",
    "repository": "repositories",
    "status": "statuses",
    "alias": "aliases",
    "person": "people",
    "child": "children",
    "index": "indices",
}

_SINGULARS: dict[str, str] = {v: k for k, v in _PLURALS.items()}

_UNCOUNTABLE = {"information", "metadata", "equipment", "news", "series", "species", "data"}

_SIBILANT_PLURALS = ("sses", "ches", "shes", "xes", "zzes")


def _split_last(phrase: str) -> tuple[str, str]:
    """Split a phrase into (head including separator, last word)."""
    cut = max(phrase.rfind("_"), phrase.rfind(" "))
    return phrase[: cut + 1], phrase[cut + 1:]


def _pluralize_word(word: str) -> str:
    lower = word.lower()
    if not word or lower in _UNCOUNTABLE or lower in _SINGULARS:
        return word
    if lower in _PLURALS:
        return _PLURALS[lower]
    if lower.endswith("y") and lower[-2:-1] not in ("a", "e", "i", "o", "u", ""):
        return word[:-1] + "ies"
    if lower.endswith(("ss", "x", "z", "ch", "sh")):
        return word + "es"
    if lower.endswith("s"):
        return word
    return word + "s"


def _singularize_word(word: str) -> str:
    lower = word.lower()
    if not word or lower in _UNCOUNTABLE or lower in _PLURALS:
        return word
    if lower in _SINGULARS:
        return _SINGULARS[lower]
    if lower.endswith("ies") and len(lower) > 3:
        return word[:-3] + "y"
    if lower.endswith(_SIBILANT_PLURALS):
        return word[:-2]
    if lower.endswith("s") and not lower.endswith(("ss", "us", "is")):
        return word[:-1]
    return word


def pluralize(phrase: str) -> str:
    """Return the plural form of a resource name."""
    head, last = _split_last(phrase)
    return head + _pluralize_word(last)


def singularize(phrase: str) -> str:
    """Return the singular form of a resource name."""
    head, last = _split_last(phrase)
    return head + _singularize_word(last)


def capitalize(word: str) -> str:
    """Upper-case the first character and lower-case the rest."""
    return word[:1].upper() + word[1:].lower()

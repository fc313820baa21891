"""Name transformations used to derive identifiers and file names for a resource.

Every helper in this module keeps underscores as literal characters. They are
never treated as word separators, so a leading underscore run survives into
every derived form (``_users`` becomes ``_Users``, ``_users`` and ``_User``).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType

from .core.errors import InvalidNameError

__all__ = [
    "ResourceName",
    "camelize",
    "classify",
    "dasherize",
    "singularize",
    "transform",
]


_WORD_BREAK = re.compile(r"[^0-9A-Za-z_]+")
_FIRST_WORD_CHAR = re.compile(r"^(_*)(.)", re.DOTALL)
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_WHITESPACE = re.compile(r"\s+")
_TAIL_WORD = re.compile(r"(?:[A-Z]?[a-z]+|[A-Z]+)(?=[^A-Za-z]*$)")

UNCOUNTABLE_WORDS = frozenset(
    {
        "data",
        "equipment",
        "information",
        "media",
        "metadata",
        "news",
        "series",
        "species",
    }
)

IRREGULAR_PLURALS = MappingProxyType(
    {
        "people": "person",
        "men": "man",
        "women": "woman",
        "children": "child",
        "mice": "mouse",
        "geese": "goose",
        "teeth": "tooth",
        "feet": "foot",
        "oxen": "ox",
        "indices": "index",
        "matrices": "matrix",
        "vertices": "vertex",
        "statuses": "status",
        "aliases": "alias",
        "buses": "bus",
        "movies": "movie",
    }
)

_IRREGULAR_SINGULARS = frozenset(IRREGULAR_PLURALS.values())
_SIBILANT_PLURALS = ("sses", "xes", "ches", "shes", "zzes")
_UNCHANGED_ENDINGS = ("ss", "us", "is")


def _upper_first(word: str) -> str:
    return _FIRST_WORD_CHAR.sub(lambda match: match.group(1) + match.group(2).upper(), word, count=1)


def _lower_first(word: str) -> str:
    return _FIRST_WORD_CHAR.sub(lambda match: match.group(1) + match.group(2).lower(), word, count=1)


def classify(value: str) -> str:
    """Return the PascalCase identifier for ``value``.

    Hyphens, dots, whitespace and any other character outside
    ``[A-Za-z0-9_]`` split words and are dropped. Each word keeps its leading
    underscores and its remaining characters verbatim; only the first letter
    after the underscores is uppercased.
    """

    words = [word for word in _WORD_BREAK.split(value) if word]
    return "".join(_upper_first(word) for word in words)


def camelize(value: str) -> str:
    """Return the camelCase identifier for ``value`` (``_users`` -> ``_users``)."""

    return _lower_first(classify(value))


def dasherize(value: str) -> str:
    """Return the kebab-case file stem for ``value``.

    Only camelCase boundaries and whitespace become hyphens. Underscores, dots
    and any other character pass through unchanged.
    """

    text = _CAMEL_BOUNDARY.sub("-", value.strip())
    text = _WHITESPACE.sub("-", text)
    return text.lower()


def _strip_suffix(word: str) -> str:
    if word.endswith("ies") and len(word) > 4:
        return word[:-3] + "y"
    if word.endswith(_SIBILANT_PLURALS):
        return word[:-2]
    if word.endswith(_UNCHANGED_ENDINGS):
        return word
    if word.endswith("s") and len(word) > 1:
        return word[:-1]
    return word


def _singular_word(word: str) -> str:
    if word in UNCOUNTABLE_WORDS or word in _IRREGULAR_SINGULARS:
        return word
    if word in IRREGULAR_PLURALS:
        return IRREGULAR_PLURALS[word]
    # "peoples" -> "people" must keep going to "person"
    stripped = _strip_suffix(word)
    return IRREGULAR_PLURALS.get(stripped, stripped)


def _match_case(template: str, word: str) -> str:
    if len(template) > 1 and template.isupper():
        return word.upper()
    if template[0].isupper():
        return word[:1].upper() + word[1:]
    return word


def singularize(value: str) -> str:
    """Reduce the last word of ``value`` to its singular form.

    The last word is the final camelCase hump or lowercase run, so
    ``UserProfiles``, ``user-profiles`` and ``user_profiles`` all singularize
    their ``profiles`` tail. Trailing non-letters are kept in place
    (``users-`` -> ``user-``, ``orders2`` -> ``order2``). The rules are fixed
    and applied in order: uncountable words, the irregular table, ``-ies`` to
    ``-y``, sibilant ``-es`` endings, ``ss``/``us``/``is`` endings left alone,
    then a trailing ``s`` is dropped. A result that is itself an irregular
    plural goes through the table once more, so the function is idempotent.
    """

    match = _TAIL_WORD.search(value)
    if match is None:
        return value

    word = match.group(0)
    singular = _singular_word(word.lower())
    if singular == word.lower():
        return value
    return value[: match.start()] + _match_case(word, singular) + value[match.end():]


@dataclass(frozen=True, slots=True)
class ResourceName:
    """Identifier forms derived once from the name supplied by the caller.

    Attributes
    ----------
    raw:
        The caller supplied name with outer whitespace removed.
    classified:
        PascalCase identifier used for class and type names.
    singular_classified:
        :attr:`classified` reduced to its singular form, used for per-item
        identifiers such as DTOs and args.
    file_stem:
        Kebab-case fragment used for directory and file names.
    singular_file_stem:
        :attr:`file_stem` reduced to its singular form, used for per-item
        file names.
    """

    raw: str
    classified: str
    singular_classified: str
    file_stem: str
    singular_file_stem: str

    def as_dict(self) -> dict[str, str]:
        return {
            "raw": self.raw,
            "classified": self.classified,
            "singular_classified": self.singular_classified,
            "file_stem": self.file_stem,
            "singular_file_stem": self.singular_file_stem,
        }


def transform(raw: str) -> ResourceName:
    """Derive every :class:`ResourceName` form from ``raw``."""

    name = (raw or "").strip()
    if not name:
        raise InvalidNameError(raw)

    classified = classify(name)
    if not classified.strip("_"):
        raise InvalidNameError(raw)

    file_stem = dasherize(name)
    return ResourceName(
        raw=name,
        classified=classified,
        singular_classified=singularize(classified),
        file_stem=file_stem,
        singular_file_stem=singularize(file_stem),
    )

"""Slugs that can be safely used in URLs."""

from __future__ import annotations

import re

# Map from (some) lowercase Unicode characters to ASCII.
_TRANSLITERATION = str.maketrans(
    {
        "ß": "sz",
        "à": "a",
        "á": "a",
        "â": "a",
        "ã": "a",
        "ä": "a",
        "å": "a",
        "æ": "ae",
        "ç": "c",
        "è": "e",
        "é": "e",
        "ê": "e",
        "ë": "e",
        "ì": "i",
        "í": "i",
        "î": "i",
        "ï": "i",
        "ð": "e",
        "ñ": "n",
        "ò": "o",
        "ó": "o",
        "ô": "o",
        "õ": "o",
        "ö": "o",
        "÷": "x",
        "ø": "o",
        "ù": "u",
        "ú": "u",
        "û": "u",
        "ü": "u",
        "ý": "y",
        "þ": "b",
        "ÿ": "y",
        "č": "c",
        "ł": "l",
        "š": "s",
        "ů": "u",
        "ž": "z",
        "а": "a",
        "б": "b",
        "в": "v",
        "г": "g",
        "д": "d",
        "е": "e",
        "ж": "zh",
        "з": "z",
        "и": "i",
        "й": "i",
        "к": "k",
        "л": "l",
        "м": "m",
        "н": "n",
        "о": "o",
        "п": "p",
        "р": "r",
        "с": "s",
        "т": "t",
        "у": "u",
        "ф": "f",
        "х": "kh",
        "ц": "ts",
        "ч": "ch",
        "ш": "sh",
        "щ": "shch",
        "ъ": "",
        "ы": "y",
        "ь": "",
        "э": "e",
        "ю": "iu",
        "я": "ia",
        "ё": "e",
    }
)

SLUG_SEPARATOR_RE = re.compile(r"[^0-9a-z]+")


def txt2slug(text: str | None) -> str:
    """Return a lowercase, hyphen-delimited ASCII slug of ``text``.

    Characters without a transliteration collapse into separators, so text
    that has no ASCII representation at all yields an empty slug.
    """
    if text is None:
        return ""
    # str.lower() rather than casefold(): casefold() turns "ß" into "ss".
    transliterated = text.lower().translate(_TRANSLITERATION)
    return SLUG_SEPARATOR_RE.sub("-", transliterated).strip("-")


__all__ = ["txt2slug"]

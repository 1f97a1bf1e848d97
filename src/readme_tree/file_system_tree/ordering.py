"""Sibling ordering: directories first, then files, each group by name."""

import unicodedata
from typing import Iterable, List, Tuple

from readme_tree.file_system_tree.dir_entry import DirEntry

# Root collation order of ASCII punctuation and symbols, which all sort before digits
PUNCTUATION_ORDER = "_-,;:!?.'\"()[]{}@*/\\&#%`^+<=>|~$"

SPACE_GROUP = 0
PUNCTUATION_GROUP = 1
SYMBOL_GROUP = 2
CURRENCY_GROUP = 3
DIGIT_GROUP = 4
LETTER_GROUP = 5

CollationKey = Tuple[Tuple[Tuple[int, int], ...], Tuple[str, ...], Tuple[int, ...]]


def _primary_weight(char: str) -> Tuple[int, int]:
    if char in PUNCTUATION_ORDER:
        index = PUNCTUATION_ORDER.index(char)
        if char == "$":
            return (CURRENCY_GROUP, index)
        return (PUNCTUATION_GROUP if index < PUNCTUATION_ORDER.index("+") else SYMBOL_GROUP, index)

    category = unicodedata.category(char)
    if category[0] == "Z" or char.isspace():
        return (SPACE_GROUP, ord(char))
    if category[0] == "P":
        return (PUNCTUATION_GROUP, len(PUNCTUATION_ORDER) + ord(char))
    if category == "Sc":
        return (CURRENCY_GROUP, len(PUNCTUATION_ORDER) + ord(char))
    if category[0] == "S":
        return (SYMBOL_GROUP, len(PUNCTUATION_ORDER) + ord(char))
    if category[0] == "N":
        return (DIGIT_GROUP, unicodedata.digit(char, ord(char)))
    return (LETTER_GROUP, ord(char))


def name_sort_key(name: str) -> CollationKey:
    """Sort key following the root locale collation used by ``localeCompare``.

    Names are compared in three passes: base characters ignoring accents and case,
    then accents (unaccented first), then case (lowercase first). At the base level
    whitespace sorts before punctuation, punctuation before symbols, symbols before
    digits and digits before letters.

    Example:
        >>> sorted(["zebra.md", "éclair.md", "Eagle.md"], key=name_sort_key)
        ['Eagle.md', 'éclair.md', 'zebra.md']
        >>> sorted(["b", "1.md", "Apple", "apple", "_private"], key=name_sort_key)
        ['_private', '1.md', 'apple', 'Apple', 'b']
    """
    primary = []
    accents: List[str] = []
    cases = []
    for char in unicodedata.normalize("NFKD", name):
        if unicodedata.combining(char):
            if accents:
                accents[-1] += char
            continue
        for folded in char.casefold():
            primary.append(_primary_weight(folded))
            accents.append("")
            cases.append(1 if char.isupper() else 0)
    return (tuple(primary), tuple(accents), tuple(cases))


def order_siblings(entries: Iterable[DirEntry]) -> List[DirEntry]:
    """Order already-filtered siblings for display.

    Directories come before non-directories and each group is sorted by
    name_sort_key. The sort is stable, so entries with identical keys keep their
    enumeration order.

    Args:
        entries: Entries of one directory, after exclusion.

    Returns:
        A new list in display order.
    """
    return sorted(entries, key=lambda entry: (not entry.is_dir, name_sort_key(entry.name)))

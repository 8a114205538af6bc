"""Exercises on strings."""

from __future__ import annotations

import string
from collections import Counter, defaultdict
from collections.abc import Iterable
from itertools import chain

_PAIRS = {")": "(", "}": "{", "]": "["}


def is_palindrome(s: str) -> bool:
    """Tell whether the ASCII letters and digits of ``s`` form a palindrome, ignoring case."""
    kept = [c.lower() for c in s if c.isascii() and c.isalnum()]
    return kept == kept[::-1]


def longest_common_prefix(strs: Iterable[str]) -> str:
    """Return the longest prefix shared by all of ``strs``."""
    words = list(strs)
    if not words:
        return ""
    first, last = min(words), max(words)
    length = 0
    for a, b in zip(first, last):
        if a != b:
            break
        length += 1
    return first[:length]


def check_if_pangram(sentence: str) -> bool:
    """Tell whether ``sentence`` uses every lower-case English letter."""
    return set(string.ascii_lowercase).issubset(sentence)


def is_valid(s: str) -> bool:
    """Tell whether every bracket in ``s`` is closed in the right order."""
    stack: list[str] = []
    for char in s:
        opener = _PAIRS.get(char)
        if opener is None:
            stack.append(char)
        elif not stack or stack.pop() != opener:
            return False
    return not stack


def is_isomorphic(s: str, t: str) -> bool:
    """Tell whether the characters of ``s`` map one-to-one onto those of ``t``."""
    last_s: dict[str, int] = {}
    last_t: dict[str, int] = {}
    for position, (a, b) in enumerate(zip(s, t, strict=True), start=1):
        if last_s.get(a, 0) != last_t.get(b, 0):
            return False
        last_s[a] = position
        last_t[b] = position
    return True


def is_anagram(s: str, t: str) -> bool:
    """Tell whether ``t`` is a rearrangement of ``s``."""
    return sorted(s) == sorted(t)


def str_str(haystack: str, needle: str) -> int:
    """Return the index of the first occurrence of ``needle``, or -1."""
    return haystack.find(needle)


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest run of ``s`` with no repeated character."""
    last_index: dict[str, int] = {}
    start = 0
    best = 0
    for index, char in enumerate(s):
        if last_index.get(char, -1) >= start:
            start = last_index[char] + 1
        last_index[char] = index
        best = max(best, index - start + 1)
    return best


def can_construct(ransom_note: str, magazine: str) -> bool:
    """Tell whether ``ransom_note`` can be cut out of the letters of ``magazine``."""
    return not Counter(ransom_note) - Counter(magazine)


def is_subsequence(s: str, t: str) -> bool:
    """Tell whether ``s`` can be had from ``t`` by deleting characters."""
    remaining = iter(t)
    return all(char in remaining for char in s)


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group words that are anagrams, groups ordered by their sorted letters."""
    groups: defaultdict[str, list[str]] = defaultdict(list)
    for word in strs:
        groups["".join(sorted(word))].append(word)
    return [groups[key] for key in sorted(groups)]


def length_of_last_word(s: str) -> int:
    """Return the length of the last space-separated word of ``s``."""
    return len(s.rstrip(" ").split(" ")[-1])


def convert(s: str, num_rows: int) -> str:
    """Write ``s`` in a zigzag over ``num_rows`` rows and read it row by row."""
    if num_rows < 1:
        raise ValueError("num_rows must be at least 1")
    if num_rows == 1:
        return s
    period = 2 * num_rows - 2
    rows: list[list[str]] = [[] for _ in range(num_rows)]
    for index, char in enumerate(s):
        offset = index % period
        rows[min(offset, period - offset)].append(char)
    return "".join(chain.from_iterable(rows))
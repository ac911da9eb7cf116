"""Pattern puzzles over strings: concatenations, brackets, runs and queries."""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Sequence
from itertools import groupby, permutations
from typing import Optional


def _tiles(s: str, pos: int, end: int, remaining: Counter[str]) -> bool:
    if pos == end:
        return True
    for word, left in remaining.items():
        if left and s.startswith(word, pos, end):
            remaining[word] -= 1
            found = _tiles(s, pos + len(word), end, remaining)
            remaining[word] += 1
            if found:
                return True
    return False


def find_substring(s: str, words: Sequence[str]) -> list[int]:
    """Return the sorted start positions of any concatenation of all ``words``."""
    total = sum(len(word) for word in words)
    if not words or total == 0:
        raise ValueError("words must not be empty")
    needed = Counter(words)
    return [
        pos
        for pos in range(len(s) - total + 1)
        if _tiles(s, pos, pos + total, needed)
    ]


def longest_valid_parentheses(s: str) -> int:
    """Return the length of the longest well-formed parentheses substring."""
    if len(s) < 2:
        return 0
    lengths = [0] * len(s)
    for i in range(1, len(s)):
        if s[i] == ")":
            j = i - lengths[i - 1] - 1
            if j >= 0 and s[j] == "(":
                lengths[i] = lengths[i - 1] + 2
                if j >= 1:
                    lengths[i] += lengths[j - 1]
    return max(lengths)


def is_valid_parentheses(s: str) -> bool:
    """Tell whether every '(' is closed; any other character closes one."""
    depth = 0
    for char in s:
        if char == "(":
            depth += 1
        else:
            depth -= 1
            if depth < 0:
                return False
    return depth == 0


def is_subsequence(s: str, parent: str) -> bool:
    """Tell whether the non-empty ``s`` can be had by deleting from ``parent``."""
    if not s:
        raise ValueError("the candidate must not be empty")
    if len(s) > len(parent):
        return False
    index = 0
    for char in parent:
        if char == s[index]:
            index += 1
            if index == len(s):
                return True
    return False


def find_longest_word(s: str, dictionary: Sequence[str]) -> str:
    """Return the longest, then smallest, dictionary word that is a subsequence of ``s``."""
    best = ""
    for word in dictionary:
        if not is_subsequence(word, s):
            continue
        if len(word) > len(best) or (len(word) == len(best) and word < best):
            best = word
    return best


def maximum_length(s: str) -> int:
    """Return the longest single-character substring occurring at least three times, or -1."""
    runs: defaultdict[str, list[int]] = defaultdict(list)
    for char, group in groupby(s):
        runs[char].append(sum(1 for _ in group))
    result = -1
    for lengths in runs.values():
        lengths.sort(reverse=True)
        longest = lengths[0]
        if len(lengths) == 1 and longest < 3:
            continue
        if len(lengths) == 2 and longest == 1:
            continue
        candidate = max(longest - 2, 1)
        if len(lengths) >= 3 and longest == lengths[1] == lengths[2]:
            candidate = longest
        elif len(lengths) >= 2 and longest - lengths[1] <= 1:
            candidate = longest - 1
        result = max(result, candidate)
    return result


def _answer(odd_letters: int, replacements: int) -> bool:
    return odd_letters - replacements * 2 < 2


def can_make_pali_queries(s: str, queries: Sequence[Sequence[int]]) -> list[bool]:
    """Answer each [left, right, k] query with prefix parity masks."""
    masks = [0]
    for char in s:
        masks.append(masks[-1] ^ (1 << (ord(char) - ord("a"))))
    return [
        _answer(bin(masks[right + 1] ^ masks[left]).count("1"), replacements)
        for left, right, replacements in queries
    ]


def can_make_pali_queries_slow(s: str, queries: Sequence[Sequence[int]]) -> list[bool]:
    """Answer each [left, right, k] query by counting the letters afresh."""
    answers = []
    for left, right, replacements in queries:
        odd = sum(n % 2 for n in Counter(s[left:right + 1]).values())
        answers.append(_answer(odd, replacements))
    return answers


def _follows(perm: Sequence[int], pattern: str) -> bool:
    return all(
        ("I" if later > earlier else "D") == step
        for earlier, later, step in zip(perm, perm[1:], pattern)
    )


def di_string_match(s: str) -> Optional[list[int]]:
    """Return the first permutation of 0..n, in order, that follows the I/D pattern."""
    if not s:
        return None
    for perm in permutations(range(len(s) + 1)):
        if _follows(perm, s):
            return list(perm)
    return None


def di_string_match_v2(s: str) -> list[int]:
    """Build a permutation following the I/D pattern greedily."""
    low, high = 0, len(s)
    result: list[int] = []
    for step in s:
        if step == "I":
            result.append(low)
            low += 1
        else:
            result.append(high)
            high -= 1
    result.append(low)
    return result
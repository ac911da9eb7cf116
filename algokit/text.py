"""String puzzles: substrings, palindromes, number parsing and words."""

from __future__ import annotations

import re
from itertools import count, zip_longest

_MIN_INT32 = -(2**31)
_MAX_INT32 = 2**31 - 1
_INTEGER = re.compile(r"[+-]?[0-9]+")


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without repeated characters."""
    after_last: dict[str, int] = {}
    left = best = 0
    for index, char in enumerate(s):
        left = max(left, after_last.get(char, 0))
        best = max(best, index - left + 1)
        after_last[char] = index + 1
    return best


def length_of_longest_substring_v2(s: str) -> int:
    """Same as ``length_of_longest_substring``, remembering last positions."""
    last: dict[str, int] = {}
    left = best = 0
    for index, char in enumerate(s):
        if char in last:
            left = max(left, last[char] + 1)
        last[char] = index
        best = max(best, index - left + 1)
    return best


def length_of_longest_substring_v3(s: str) -> int:
    """Same measure taken over the UTF-8 bytes of ``s``."""
    last: dict[int, int] = {}
    left = best = 0
    for index, byte in enumerate(s.encode("utf-8")):
        if byte in last:
            left = max(left, last[byte] + 1)
        last[byte] = index
        best = max(best, index - left + 1)
    return best


def _expand(s: str, left: int, right: int) -> tuple[int, int]:
    while left >= 0 and right < len(s) and s[left] == s[right]:
        left -= 1
        right += 1
    return left + 1, right - left - 1


def longest_palindrome(s: str) -> str:
    """Return the first longest palindromic substring, grown from each centre."""
    start = length = 0
    for centre in range(len(s)):
        odd = _expand(s, centre, centre)
        even = _expand(s, centre, centre + 1)
        candidate = odd if odd[1] > even[1] else even
        if candidate[1] > length:
            start, length = candidate
    return s[start:start + length]


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``; 0 if the result leaves 32 bits."""
    digits = int(str(abs(x))[::-1])
    result = -digits if x < 0 else digits
    return result if _MIN_INT32 <= result <= _MAX_INT32 else 0


def atoi(text: str) -> int:
    """Parse a leading signed integer, clamped to the 32-bit range."""
    text = text.strip()
    sign = 1
    if text[:1] == "-":
        sign = -1
        text = text[1:]
    elif text[:1] == "+":
        text = text[1:]
    result = 0
    for char in text:
        if not "0" <= char <= "9":
            break
        result = result * 10 + ord(char) - ord("0")
        if result > _MAX_INT32:
            return _MAX_INT32 if sign == 1 else _MIN_INT32
    return result * sign


def is_palindrome_number(x: int) -> bool:
    """Tell whether the decimal digits of ``x`` read the same both ways."""
    if x < 0 or (x % 10 == 0 and x > 0):
        return False
    reversed_half = 0
    while x > reversed_half:
        reversed_half = reversed_half * 10 + x % 10
        x //= 10
    return reversed_half == x or reversed_half // 10 == x


def is_palindrome(s: str) -> bool:
    """Tell whether ``s`` is a non-empty palindrome, byte for byte."""
    data = s.encode("utf-8")
    return bool(data) and data == data[::-1]


def _revision(part: str) -> int:
    return int(part) if part else 0


def compare_version(version1: str, version2: str) -> int:
    """Compare dotted version strings: 1, -1 or 0; missing parts count as 0."""
    pairs = zip_longest(version1.split("."), version2.split("."), fillvalue="0")
    for first, second in pairs:
        a, b = _revision(first), _revision(second)
        if a > b:
            return 1
        if a < b:
            return -1
    return 0


def reverse_words(s: str) -> str:
    """Reverse each space-separated word, keeping the spaces in place."""
    return " ".join(word[::-1] for word in s.split(" "))


def reverse_words_v2(s: str) -> str:
    """Reverse each word by scanning the characters once."""
    pieces: list[str] = []
    word: list[str] = []
    for char in s:
        if char == " ":
            pieces.extend(reversed(word))
            pieces.append(" ")
            word = []
        else:
            word.append(char)
    pieces.extend(reversed(word))
    return "".join(pieces)


def _is_palindromic(number: int) -> bool:
    text = str(number)
    return text == text[::-1]


def nearest_palindromic(n: str) -> str:
    """Return the closest palindromic integer other than ``n`` itself.

    The smaller one wins a tie; text that is not an integer gives "".
    """
    if not _INTEGER.fullmatch(n):
        return ""
    value = int(n)
    for step in count(1):
        if step <= value and _is_palindromic(value - step):
            return str(value - step)
        if _is_palindromic(value + step):
            return str(value + step)
    raise AssertionError("unreachable")


def balanced_string_split(s: str) -> int:
    """Return how many balanced pieces of 'L' and 'R' the string splits into."""
    balance = 0
    pieces = 0
    for char in s:
        if char == "L":
            balance += 1
        elif char == "R":
            balance -= 1
        if balance == 0:
            pieces += 1
    return pieces
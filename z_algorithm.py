# Z-algorithm: prefix-match array of a string and its use for pattern search
from typing import Any, List, Sequence


def z_function(s: Sequence[Any]) -> List[int]:
    """
    Compute the Z-array of `s`.

    Entry i is the length of the longest substring starting at s[i] that
    is also a prefix of s, so entry 0 is len(s). An empty input gives [].

    [left, right] is the rightmost Z-box found so far; right is the last
    matched index (inclusive) and only ever moves forward.
    """
    n = len(s)
    if n == 0:
        return []

    z = [0] * n
    z[0] = n
    left = right = 0

    for i in range(1, n):
        if i <= right and z[i - left] < right - i + 1:
            # Mirrored match stays inside the box, nothing to compare
            z[i] = z[i - left]
            continue

        if i > right:
            left = right = i
        else:
            left = i
        while right < n and s[right - left] == s[right]:
            right += 1
        z[i] = right - left
        right -= 1

    return z


def z_match(text: Sequence[Any], pattern: Sequence[Any]) -> List[int]:
    """
    Match `text` against the prefixes of `pattern`.

    Entry i is the length of the longest prefix of pattern starting at
    text[i]. A value equal to len(pattern) marks an occurrence starting at i.
    An empty pattern gives all zeros.

    Args:
        text: The sequence to search within.
        pattern: The sequence to search for.

    Returns:
        A list of len(text) match lengths.
    """
    txt_len = len(text)
    pat_len = len(pattern)
    z = [0] * txt_len
    if pat_len == 0:
        return z

    z_pattern = z_function(pattern)
    # Z-box over the text matching a prefix of the pattern
    left, right = 0, -1

    for i in range(txt_len):
        if i <= right and z_pattern[i - left] < right - i + 1:
            z[i] = z_pattern[i - left]
            continue

        if i > right:
            left = right = i
        else:
            left = i
        while right < txt_len and right - left < pat_len and text[right] == pattern[right - left]:
            right += 1
        z[i] = right - left
        right -= 1

    return z


def z_search(text: Sequence[Any], pattern: Sequence[Any]) -> List[int]:
    """Return the start positions of every occurrence of `pattern` in `text`."""
    pat_len = len(pattern)
    if pat_len == 0:
        return []
    return [i for i, matched in enumerate(z_match(text, pattern)) if matched == pat_len]

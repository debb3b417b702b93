# Knuth–Morris–Pratt prefix function and linear-time text scan
from typing import Any, List, Sequence


def prefix_function(pattern: Sequence[Any]) -> List[int]:
    """
    Compute the prefix (failure) function of `pattern`.

    Entry i is the length of the longest proper prefix of pattern[0..i]
    that is also a suffix of pattern[0..i]. An empty pattern gives [].
    """
    m = len(pattern)
    lps = [0] * m
    length = 0  # Length of the previous longest prefix suffix
    i = 1

    while i < m:
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        else:
            if length != 0:
                # No advance of i: fallbacks are paid for by earlier increments
                length = lps[length - 1]
            else:
                lps[i] = 0
                i += 1

    return lps


def kmp_match(text: Sequence[Any], pattern: Sequence[Any]) -> List[int]:
    """
    Scan `text` against `pattern` and record the match state per position.

    Entry i is the number of pattern symbols matched ending at text[i].
    A value equal to len(pattern) marks an occurrence ending at i; after it
    the scan folds back through the prefix function, so overlapping
    occurrences are still reported. An empty pattern gives [].
    """
    txt_len = len(text)
    pat_len = len(pattern)
    if pat_len == 0:
        return []

    lps = prefix_function(pattern)
    state = [0] * txt_len
    i = 0  # Index for text
    j = 0  # Index for pattern

    while i < txt_len:
        if pattern[j] == text[i]:
            j += 1
            state[i] = j
            i += 1

        if j == pat_len:
            j = lps[j - 1]
        elif i < txt_len and pattern[j] != text[i]:
            if j != 0:
                j = lps[j - 1]
            else:
                state[i] = 0
                i += 1

    return state


def kmp_search(text: Sequence[Any], pattern: Sequence[Any]) -> List[int]:
    """
    KMP string searching algorithm.
    Returns a list of start positions where pattern occurs in text.
    """
    pat_len = len(pattern)
    if pat_len == 0 or len(text) == 0:
        return []

    return [i - pat_len + 1 for i, matched in enumerate(kmp_match(text, pattern)) if matched == pat_len]

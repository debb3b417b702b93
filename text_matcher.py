# Occurrence search over texts and document pages using KMP or the Z-algorithm

import logging
from typing import Any, Callable, Dict, List, Sequence, Tuple

from config import DEFAULT_ALGORITHM, HIGHLIGHT_START, HIGHLIGHT_END
from kmp import kmp_search
from z_algorithm import z_search

logger = logging.getLogger("matcher")

SUPPORTED_ALGORITHMS: Dict[str, Callable[[Sequence[Any], Sequence[Any]], List[int]]] = {
    'kmp': kmp_search,
    'z': z_search,
}


def find_occurrences(
    text: Sequence[Any],
    pattern: Sequence[Any],
    algorithm: str = DEFAULT_ALGORITHM,
    ignore_case: bool = False
) -> List[int]:
    """
    Find every occurrence of `pattern` in `text`.

    Args:
        text: The text to search within.
        pattern: The pattern to search for.
        algorithm: 'kmp' or 'z'.
        ignore_case: Lower-case both inputs before searching (str only).

    Returns:
        Sorted start offsets of all occurrences, overlapping ones included.

    Raises:
        ValueError: If the algorithm is unknown, or ignore_case is used with
            inputs that are not strings.
    """
    search = SUPPORTED_ALGORITHMS.get(algorithm)
    if search is None:
        raise ValueError(
            f"Unknown algorithm '{algorithm}'. Choose one of: {', '.join(SUPPORTED_ALGORITHMS)}"
        )

    if ignore_case:
        if not isinstance(text, str) or not isinstance(pattern, str):
            raise ValueError("ignore_case is only supported for str inputs")
        text, pattern = text.lower(), pattern.lower()

    offsets = search(text, pattern)
    logger.debug(
        f"{algorithm} search: pattern length {len(pattern)}, text length {len(text)}, "
        f"{len(offsets)} occurrence(s)"
    )
    return offsets


def search_pages(
    pages: List[str],
    pattern: str,
    algorithm: str = DEFAULT_ALGORITHM,
    ignore_case: bool = False
) -> List[Dict[str, int]]:
    """
    Search every page of a document.

    Returns a list of {'page': <1-based page number>, 'offset': <start offset>}.
    """
    matches: List[Dict[str, int]] = []
    for i, page in enumerate(pages):
        for offset in find_occurrences(page, pattern, algorithm, ignore_case):
            matches.append({'page': i + 1, 'offset': offset})

    logger.info(f"Found {len(matches)} occurrence(s) of a {len(pattern)}-character pattern in {len(pages)} page(s)")
    return matches


def _merge_spans(offsets: List[int], length: int) -> List[Tuple[int, int]]:
    spans: List[Tuple[int, int]] = []
    for start in sorted(offsets):
        end = start + length
        if spans and start <= spans[-1][1]:
            spans[-1] = (spans[-1][0], max(spans[-1][1], end))
        else:
            spans.append((start, end))
    return spans


def highlight_occurrences(text: str, offsets: List[int], length: int) -> str:
    """
    Wrap every occurrence in `text` with terminal colour codes.
    Overlapping or touching occurrences are highlighted as one span.
    """
    if length <= 0 or not offsets:
        return text

    parts = []
    last = 0
    for start, end in _merge_spans(offsets, length):
        parts.append(text[last:start])
        parts.append(f"{HIGHLIGHT_START}{text[start:end]}{HIGHLIGHT_END}")
        last = end
    parts.append(text[last:])
    return ''.join(parts)


def show_matches(text: str, pattern: str, algorithm: str = DEFAULT_ALGORITHM, ignore_case: bool = False) -> None:
    """
    Print `text` with every occurrence of `pattern` highlighted.
    """
    offsets = find_occurrences(text, pattern, algorithm, ignore_case)
    print(highlight_occurrences(text, offsets, len(pattern)))
    print(f"{len(offsets)} occurrence(s) at offset(s): {', '.join(map(str, offsets)) or '-'}")

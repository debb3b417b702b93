"""Search configuration and constants."""

# Search configuration
DEFAULT_ALGORITHM: str = "kmp"
PDF_EXTENSION: str = ".pdf"
PAGE_SEPARATOR: str = "\f"  # form feed splits plain text files into pages

# Terminal highlighting
HIGHLIGHT_START: str = "\033[92m"
HIGHLIGHT_END: str = "\033[0m"

# Built-in samples shown from the menu
SAMPLE_PREFIX_PATTERN: str = "AABAACAABAA"
SAMPLE_Z_STRING: str = "aabaabcaxaabaabcy"
SAMPLE_TEXT: str = "ABABDABACDABABCABAB"
SAMPLE_PATTERN: str = "ABABCABAB"

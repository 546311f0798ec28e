"""Brute-force regex search over stored logs."""

import logging
import re
from pathlib import Path
from typing import Iterable

from .errors import ParseError
from .models.search import FileHits, SearchHit
from .paths import find_log_files

logger = logging.getLogger(__name__)


def compile_terms(terms: Iterable[str]) -> list[re.Pattern]:
    """Compile each search term as a regular expression.

    Raises:
        ParseError: Naming the first term that is not a valid pattern
    """
    patterns = []
    for term in terms:
        try:
            patterns.append(re.compile(term))
        except re.error as e:
            raise ParseError(f"could not compile search term: {term} ({e})", term) from e
    return patterns


def build_context(text: str, start: int, radius: int) -> str:
    """Cut a window of `radius` characters either side of `start`.

    The window is clamped to the text and every line is tab-indented.
    """
    lower = max(0, start - radius)
    upper = min(len(text), start + radius)
    return "".join(f"\t{line}\n" for line in text[lower:upper].split("\n"))


def search_text(
    file_path: Path,
    text: str,
    patterns: list[re.Pattern],
    radius: int,
) -> FileHits:
    """Find every match of every pattern in one log's text.
    
    Patterns are applied one after another, so all hits for the first
    term come before any hit for the second. Numbering restarts at 1 for
    each term.
    """
    result = FileHits(file_path=file_path)
    for pattern in patterns:
        for number, match in enumerate(pattern.finditer(text), 1):
            result.hits.append(
                SearchHit(
                    file_path=file_path,
                    term=pattern.pattern,
                    number=number,
                    match_offset=match.start(),
                    context_text=build_context(text, match.start(), radius),
                )
            )
    return result


def search_patterns(root: str, patterns: list[re.Pattern], radius: int) -> list[FileHits]:
    """Search every log under root with already compiled patterns.
    
    Args:
        root: Root directory as written in the configuration
        patterns: Compiled search terms, applied in order
        radius: Characters of context on each side of a match
        
    Returns:
        One FileHits per readable log, oldest log first. Logs without a
        match are included with no hits.
    """
    files = find_log_files(root)
    logger.debug("Searching %d log(s) under %s", len(files), root)

    results: list[FileHits] = []
    for file_path in files:
        try:
            text = file_path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.warning("Skipping unreadable log %s: %s", file_path, e)
            continue

        results.append(search_text(file_path, text, patterns, radius))

    return results


def search_logs(root: str, terms: list[str], radius: int) -> list[FileHits]:
    """Compile the terms, then search every log under root.
    
    Raises:
        ParseError: If a term is not a valid regular expression. Raised
            before any file is read.
    """
    return search_patterns(root, compile_terms(terms), radius)

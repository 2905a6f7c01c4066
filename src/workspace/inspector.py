"""Parsing of the Umi-OCR tab listing.

The ``--all_pages`` reply is free text with one tab per line, typically
``<index> <name>_<n>``. Only tabs carrying the reserved name prefix are
of interest here.
"""

import re

from src.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_TAB_NAME = "BatchDOC"
MAX_INDEX = 0xFFFF


def extract_stale_indices(
    listing: str, tab_name: str = DEFAULT_TAB_NAME
) -> list[int]:
    """Find the indices of tabs left open by earlier runs.

    A line matches when, after leading whitespace, it starts with ASCII digits,
    whitespace, then ``<tab_name>_``. Digit runs beyond the 16-bit index
    range are skipped.

    Args:
        listing: Raw tab listing text.
        tab_name: Reserved tab name prefix.

    Returns:
        Indices in the order they appear in the listing.
    """
    pattern = re.compile(
        rf"^[ \t]*(\d+)[ \t]+{re.escape(tab_name)}_", re.MULTILINE | re.ASCII
    )
    indices: list[int] = []
    for match in pattern.finditer(listing):
        index = int(match.group(1))
        if index > MAX_INDEX:
            logger.warning("Skipping out-of-range tab index %s", match.group(1))
            continue
        indices.append(index)
    return indices


def contains_fresh_entry(listing: str, tab_name: str = DEFAULT_TAB_NAME) -> bool:
    """Return whether ``<tab_name>_<digits>`` appears anywhere in the listing."""
    return re.search(rf"{re.escape(tab_name)}_\d+", listing, re.ASCII) is not None

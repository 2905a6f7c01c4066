"""Path normalization and output-path derivation.

Umi-OCR expects forward slashes and writes its result next to the input
as ``<stem><suffix><extension>``, e.g. ``report.layered.pdf``.
"""

DEFAULT_SUFFIX = ".layered"
DEFAULT_EXTENSION = ".pdf"


def normalize_path(path: str) -> str:
    """Replace every backslash with a forward slash."""
    return path.replace("\\", "/")


def _strip_extension(name: str) -> str:
    """Drop the text from the last dot on, unless the name starts there.

    ``file.tar.gz`` gives ``file.tar``, ``file.`` gives ``file`` and a
    dotfile such as ``.hidden`` is returned unchanged.
    """
    stem, dot, _ = name.rpartition(".")
    if not dot or not stem:
        return name
    return stem


def derive_output_path(
    path: str,
    suffix: str = DEFAULT_SUFFIX,
    extension: str = DEFAULT_EXTENSION,
) -> str:
    """Derive the output file Umi-OCR will write for ``path``.

    Exactly one extension is stripped from the file name, so
    ``file.tar.gz`` becomes ``file.tar.layered.pdf``. The directory part
    is kept verbatim.

    Args:
        path: Input document path, in any separator style.
        suffix: Text appended to the stem.
        extension: Extension of the produced file.

    Returns:
        The normalized output path.

    Raises:
        ValueError: If ``path`` has no file name component.
    """
    directory, sep, name = normalize_path(path).rpartition("/")
    if not name or name in (".", ".."):
        raise ValueError(f"Path has no file name: {path!r}")
    stem = _strip_extension(name)
    return normalize_path(f"{directory}{sep}{stem}{suffix}{extension}")

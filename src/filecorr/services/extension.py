# services/extension.py
"""
Extension helpers.

Pure functions over path strings; nothing here touches the filesystem.

An extension is whatever follows the last ``.`` of the basename. A dotfile
such as ``.bashrc`` therefore has the extension ``bashrc``: splitting on
``.`` yields ``["", "bashrc"]`` and the last segment wins. ``stem_of`` is
deliberately asymmetric and leaves ``.bashrc`` whole, because a dot in
first position is not treated as an extension separator when stripping.
"""

from pathlib import Path
from typing import AbstractSet, List, Sequence, Union

from filecorr.exceptions import InvalidArgumentError

ExtensionGroup = Union[str, AbstractSet[str], Sequence[str]]


def basename(path: Union[str, Path]) -> str:
    """Final ``/``-separated segment of ``path``, ignoring trailing slashes."""
    text = str(path)
    stripped = text.rstrip("/")
    if not stripped:
        return text[:1]
    return stripped.rsplit("/", 1)[-1]


def extension_of(path: Union[str, Path]) -> str:
    """
    Get the extension of a file.

    Examples:
        >>> extension_of("a.b.c")
        'c'
        >>> extension_of("noext")
        ''
        >>> extension_of(".bashrc")
        'bashrc'
    """
    parts = basename(path).split(".")
    last = len(parts) - 1

    if last > 0:
        return parts[last]

    return ""


def stem_of(path: Union[str, Path]) -> str:
    """
    Get the basename of a file without its extension.

    Examples:
        >>> stem_of("photos/mufasa.jpg")
        'mufasa'
        >>> stem_of("a.b.c")
        'a.b'
        >>> stem_of(".bashrc")
        '.bashrc'
    """
    name = basename(path)
    pos = name.rfind(".")

    if pos <= 0:
        return name

    return name[:pos]


def filter_by_extension(files: Sequence[str], extension: ExtensionGroup) -> List[str]:
    """
    Keep the files whose extension matches.

    Args:
        files: Paths to filter. Relative order is preserved.
        extension: A single extension (a leading ``.`` is stripped) or a
            collection of extensions, compared verbatim.
            A list is a collection, so ``[".jpg"]`` only matches the
            literal extension ``.jpg``; pass ``".jpg"`` for a single
            extension.

    Returns:
        The matching paths

    Raises:
        InvalidArgumentError: If ``extension`` is neither a string nor a
            collection of strings
    """
    if isinstance(extension, str):
        wanted = extension[1:] if extension.startswith(".") else extension
        return [f for f in files if extension_of(f) == wanted]

    if isinstance(extension, (set, frozenset, list, tuple)):
        allowed = frozenset(extension)
        return [f for f in files if extension_of(f) in allowed]

    raise InvalidArgumentError(
        f"Extension must be a string or a collection of strings, got {type(extension).__name__}",
        argument="extension",
    )

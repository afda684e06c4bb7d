"""URL helpers: optional construction and query item editing."""
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple
from urllib.parse import SplitResult, unquote, urlencode, urljoin, urlsplit, urlunsplit

from curvekit.types import CannotGetComponentsError, CannotGetURLError


def url_from_optional(string: Optional[str], relative_to: Optional[str] = None) -> Optional[str]:
    """
    Build a URL from a string that may be missing.

    Args:
        string: URL or relative reference; None gives None
        relative_to: Base URL to resolve against

    Returns:
        The (resolved) URL, or None if string is None or unparseable
    """
    if string is None:
        return None
    try:
        if relative_to is not None:
            return urljoin(relative_to, string)
        urlsplit(string)
    except ValueError:
        return None
    return string


def _get_components(url: str) -> Tuple[SplitResult, List[str]]:
    """Split a URL, keeping each query item as its raw ``name[=value]`` text."""
    try:
        components = urlsplit(url)
    except ValueError:
        raise CannotGetComponentsError(url)
    pieces = components.query.split("&") if components.query else []
    return components, pieces


def _item_name(piece: str) -> str:
    return unquote(piece.split("=", 1)[0])


def _get_url(
    components: SplitResult,
    pieces: List[str],
    new_items: Sequence[Tuple[str, str]] = ()
) -> str:
    # Kept pieces go back verbatim; only new items are encoded
    try:
        if new_items:
            pieces = pieces + [urlencode(list(new_items))]
        return urlunsplit(components._replace(query="&".join(pieces)))
    except (TypeError, ValueError):
        raise CannotGetURLError(components)


def replacing_query_items(url: str, query_items: Mapping[str, str]) -> str:
    """
    Replace query items, adding any that were missing.

    Every existing item whose name is a key in query_items is removed, then
    the new items are appended in mapping order. Items that are not touched
    keep their original text, encoding included.

        >>> replacing_query_items("http://example.com?foo=bar",
        ...                       {"foo": "replaced", "bar": "added"})
        'http://example.com?foo=replaced&bar=added'

    Args:
        url: URL to edit
        query_items: Names and values to set

    Returns:
        Edited URL

    Raises:
        CannotGetComponentsError: If the URL cannot be split
        CannotGetURLError: If the edited URL cannot be reassembled
    """
    components, pieces = _get_components(url)
    pieces = [piece for piece in pieces if _item_name(piece) not in query_items]
    return _get_url(components, pieces, list(query_items.items()))


def removing_query_items(url: str, names: Iterable[str]) -> str:
    """
    Remove query items by name.

        >>> removing_query_items("http://example.com?foo=bar&baz=quux",
        ...                      ["foo", "corge"])
        'http://example.com?baz=quux'

    Raises:
        CannotGetComponentsError: If the URL cannot be split
        CannotGetURLError: If the edited URL cannot be reassembled
    """
    banned = set(names)
    components, pieces = _get_components(url)
    pieces = [piece for piece in pieces if _item_name(piece) not in banned]
    return _get_url(components, pieces)

"""Insert a node into raw HTML at a sentinel comment."""

from __future__ import annotations

from .dom import Node, text


class SpliceMarkerNotFoundError(RuntimeError):
    """Raised when the homepage fragment lacks the splice marker.

    Rendering without the marker would silently drop the interactive example
    from the homepage, so the build must stop instead.
    """

    def __init__(self, marker: str) -> None:
        self.marker = marker
        msg = (
            "Could not find the comment where the larger example on the homepage "
            f"should have been inserted ({marker}). Was it removed or edited? "
            "Without it the interactive example would be omitted."
        )
        super().__init__(msg)


def splice(marker: str, content: str, inserted: Node) -> list[Node]:
    """Split ``content`` at the first ``marker`` and put ``inserted`` between.

    Parameters
    ----------
    marker : str
        Literal substring to replace; it is dropped from the output.
    content : str
        Raw HTML fragment to split.
    inserted : Node
        Node placed where the marker was.

    Returns
    -------
    list[Node]
        ``[Text(before), inserted, Text(after)]``.

    Raises
    ------
    SpliceMarkerNotFoundError
        If ``marker`` does not occur in ``content``.

    Examples
    --------
    >>> from roc_www.dom import text
    >>> splice("<!-- x -->", "a<!-- x -->b", text("W"))
    [Text(content='a'), Text(content='W'), Text(content='b')]
    """
    before, found, after = content.partition(marker)
    if not found:
        raise SpliceMarkerNotFoundError(marker)
    parts: list[Node] = [text(before), inserted, text(after)]
    return parts


__all__ = ["SpliceMarkerNotFoundError", "splice"]

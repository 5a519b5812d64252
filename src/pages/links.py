import re

PAGE_LINK_PATTERN = re.compile(rb"\[([^\]]+)\]")


def render_links(body: bytes) -> bytes:
    """Replace every ``[Title]`` in ``body`` with ``<a href="Title">Title</a>``.

    The captured text is inserted as-is, without escaping.
    """

    def to_anchor(match: re.Match[bytes]) -> bytes:
        title = match.group(1)
        return b'<a href="' + title + b'">' + title + b"</a>"

    return PAGE_LINK_PATTERN.sub(to_anchor, body)

"""Parse the attributions out of an existing snapshot."""

from __future__ import annotations


def parse_preferred_why(contents: bytes | str) -> dict[str, str]:
    """Return the preferred source for each dependency listed in ``contents``.

    Given::

        encoding           from encoding/json
        encoding/binary    from encoding/base64+

    it returns ``{"encoding": "encoding/json", "encoding/binary": "encoding/base64"}``.
    Keeping these sources stable minimizes diffs when a new, lexicographically
    earlier importer appears.

    Best effort only: lines that don't fit the pattern are skipped.
    """
    if isinstance(contents, bytes):
        contents = contents.decode("utf-8", errors="replace")

    preferred: dict[str, str] = {}
    for line in contents.splitlines():
        words = line.split()
        try:
            i = words.index("from")
        except ValueError:
            continue
        if i < 1 or i >= len(words) - 1:
            continue
        preferred[words[i - 1]] = words[i + 1].rstrip("+")
    return preferred

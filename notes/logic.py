"""Wikilink resolution between notes.

Both directions are recomputed from the raw note bodies on every call;
there is no link index.
"""
import re

WIKILINK_PATTERN = re.compile(r"\[\[([^\]]+)\]\]")


def extract_wikilinks(content: str) -> list[str]:
    """Return the text of every ``[[...]]`` reference, in order of appearance."""
    if not content:
        return []
    return WIKILINK_PATTERN.findall(content)


def resolve_links(note, notes) -> list:
    """
    Notes referenced from ``note``'s body by exact title.

    Every other note whose title equals one of the wikilink targets is
    returned in collection order, so notes sharing a title all match.
    """
    targets = set(extract_wikilinks(note.content))
    if not targets:
        return []
    return [other for other in notes if other.pk != note.pk and other.title in targets]


def find_backlinks(note, notes) -> list:
    """
    Notes whose body contains the literal text ``[[<note.title>]]``.

    This is a substring test on the raw body, so a reference inside a code
    block still counts as a backlink.
    """
    pattern = f"[[{note.title}]]"
    return [other for other in notes if other.pk != note.pk and pattern in (other.content or "")]

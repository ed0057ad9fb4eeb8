"""Tag related tools."""

from collections.abc import Iterable

from django.core.exceptions import ImproperlyConfigured


def parse_tag_names(raw_tags: str | Iterable[str] | None, separator: str = ",") -> tuple[str, ...]:
    """
    Build the ordered allow-list of tag names.

    Accepts either a separated string (as read from the environment) or an
    iterable of names. Names are trimmed, empty names are dropped and the first
    occurrence of a duplicate wins.
    """
    if raw_tags is None:
        return ()

    if isinstance(raw_tags, str):
        raw_tags = raw_tags.split(separator)
    elif not isinstance(raw_tags, Iterable):
        raise ImproperlyConfigured(f"Tag names must be a string or a list of strings, got {type(raw_tags).__name__}.")

    tags = []
    for tag_name in raw_tags:
        if not isinstance(tag_name, str):
            raise ImproperlyConfigured(f"Tag name {tag_name!r} is not a string.")
        tag_name = tag_name.strip()
        if tag_name and tag_name not in tags:
            tags.append(tag_name)

    return tuple(tags)

"""
Tag validation

A tag is a non-empty run of ASCII letters, digits and underscores. The
active tag set is validated eagerly, before any line is looked at, so a
bad tag never yields partial output.
"""

import re
from typing import FrozenSet, Iterable


TAG_PATTERN = re.compile(r'[A-Za-z0-9_]+')


class MalformedTagError(ValueError):
    """Raised when the active tag set contains an entry that is not a valid tag"""

    def __init__(self, tag: object) -> None:
        self.tag = tag
        super().__init__(f"ecomcon: malformed tag {tag!r}")


def tag_isValid(tag: object) -> bool:
    """
    Check a single tag against the tag syntax

    Args:
        tag: Candidate tag (anything that is not a str is invalid)

    Returns:
        True for non-empty strings made only of [A-Za-z0-9_]

    Example:
        >>> tag_isValid("debug_2")
        True
        >>> tag_isValid("bad tag!")
        False
    """
    return isinstance(tag, str) and TAG_PATTERN.fullmatch(tag) is not None


def tagSet_build(tags: Iterable[str]) -> FrozenSet[str]:
    """
    Validate tags and freeze them into a lookup set

    Args:
        tags: Any iterable of tag strings (set, list, tuple, ...)

    Returns:
        Frozen set of validated tags

    Raises:
        MalformedTagError: On the first entry that fails tag_isValid()
    """
    if isinstance(tags, str):
        # A bare string would otherwise be iterated character by character
        tags = [tags]

    active = set()
    for tag in tags:
        if not tag_isValid(tag):
            raise MalformedTagError(tag)
        active.add(tag)
    return frozenset(active)

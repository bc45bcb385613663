"""
Tag and attribute deny-lists.

Tags match exactly after trim + lower-case; attributes match by
case-insensitive regex search. The two rules differ on purpose.
"""

from __future__ import annotations

import re
from typing import FrozenSet, Iterable, Tuple, Union

PatternLike = Union[str, re.Pattern]


def normalize_tag_blacklist(tags: Iterable[str]) -> FrozenSet[str]:
    return frozenset(t.strip().lower() for t in tags if t and t.strip())


def compile_attribute_blacklist(patterns: Iterable[PatternLike]) -> Tuple[re.Pattern, ...]:
    compiled = []
    for pattern in patterns:
        if isinstance(pattern, re.Pattern):
            compiled.append(pattern)
        else:
            compiled.append(re.compile(str(pattern), re.IGNORECASE))
    return tuple(compiled)


def is_blacklisted_tag(name: str, blacklist: FrozenSet[str]) -> bool:
    return name.strip().lower() in blacklist


def is_blacklisted_attribute(name: str, patterns: Tuple[re.Pattern, ...]) -> bool:
    return any(p.search(name) for p in patterns)

"""
Tag name normalization shared by the repositories and the client composer.
"""
from typing import Iterable, List, Optional

MAX_TAG_LENGTH = 100


def normalize_tag_name(name: Optional[str]) -> Optional[str]:
    """Return the trimmed tag name, or None when nothing is left."""
    if name is None:
        return None
    cleaned = name.strip()
    if not cleaned:
        return None
    return cleaned


def normalize_tag_names(names: Optional[Iterable[str]]) -> List[str]:
    """Trim names, drop empties, and de-duplicate preserving first occurrence."""
    if not names:
        return []
    seen = set()
    out: List[str] = []
    for raw in names:
        name = normalize_tag_name(raw)
        if name is None or name in seen:
            continue
        seen.add(name)
        out.append(name)
    return out

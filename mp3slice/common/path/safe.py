# mp3slice/common/path/safe.py
from __future__ import annotations

from pathlib import Path


def resolve_root(root: Path | str) -> Path:
    """Resolve an output root directory."""
    return Path(root).expanduser().resolve()


def safe_join(root: Path | str, rel: Path | str) -> Path:
    """
    Join 'root' and a relative path, ensuring the result stays inside 'root'.
    Raises ValueError if traversal escapes the root or 'rel' is empty.
    """
    if not str(rel).strip():
        raise ValueError("empty relative path")
    r = resolve_root(root)
    p = (r / str(rel)).resolve()
    try:
        p.relative_to(r)
    except ValueError as exc:
        raise ValueError(f"path {p} escapes root {r}") from exc
    if p == r:
        raise ValueError(f"path {rel!r} resolves to the root itself")
    return p

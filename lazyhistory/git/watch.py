"""Git metadata watch signatures.

Computes cheap hashes over the refs that history views depend on. The
explorer compares these signatures to decide when its cached logs are stale.
"""

from __future__ import annotations

import hashlib
from pathlib import Path


def _update_digest(digest, token: str) -> None:
    """Append a token plus separator byte to a hash digest."""
    digest.update(token.encode("utf-8", errors="surrogateescape"))
    digest.update(b"\0")


def _path_stat_signature(path: Path) -> tuple[str, int, int, int]:
    """Return a stable stat tuple describing ``path`` existence and metadata."""
    try:
        st = path.stat()
    except FileNotFoundError:
        return ("missing", 0, 0, 0)
    except OSError:
        return ("error", 0, 0, 0)
    return ("ok", st.st_mtime_ns, st.st_size, st.st_mode)


def build_history_watch_signature(git_dir: Path | None) -> str:
    """Build a digest over git metadata that changes when branches or HEAD move.

    Loose ref directories are covered by their own stat (new or deleted
    branches); the checked-out ref file covers commits on the current branch.
    """
    digest = hashlib.blake2b(digest_size=20)
    if git_dir is None:
        _update_digest(digest, "git:none")
        return digest.hexdigest()

    git_dir = git_dir.resolve()
    _update_digest(digest, f"git_dir:{git_dir}")

    def add_path_token(label: str, path: Path) -> None:
        state, mtime_ns, size, mode = _path_stat_signature(path)
        _update_digest(digest, f"{label}:{state}:{mtime_ns}:{size}:{mode}")

    head_path = git_dir / "HEAD"
    add_path_token("head", head_path)

    ref_name = ""
    try:
        head_text = head_path.read_text(encoding="utf-8", errors="replace").strip()
    except OSError:
        head_text = ""
    if head_text.startswith("ref: "):
        ref_name = head_text[5:].strip()
    else:
        # Detached HEAD stores the sha itself.
        _update_digest(digest, f"head_sha:{head_text}")
    _update_digest(digest, f"head_ref:{ref_name}")

    if ref_name:
        add_path_token("head_ref_file", git_dir / ref_name)

    add_path_token("packed_refs", git_dir / "packed-refs")
    add_path_token("fetch_head", git_dir / "FETCH_HEAD")
    add_path_token("refs_heads", git_dir / "refs" / "heads")
    add_path_token("refs_remotes", git_dir / "refs" / "remotes")

    return digest.hexdigest()


__all__ = ["build_history_watch_signature"]

"""Lookup helpers for the CLI.

Functions:
- resolve_user_name(prefix, candidates) -> str: Resolve prefix to a unique user name
- get_available_track_ids(tracks_dir) -> list[str]: Track files available on disk
- track_path(track_id, tracks_dir) -> Path: Location of a track file
"""

from pathlib import Path


class AmbiguousUserError(Exception):
    """Raised when a user name prefix matches multiple users."""

    def __init__(self, prefix: str, candidates: list[str]):
        self.prefix = prefix
        self.candidates = candidates
        super().__init__(
            f"Prefijo '{prefix}' es ambiguo. Candidatos:\n"
            + "\n".join(f"  - {c}" for c in candidates)
        )


class UserNotFoundError(Exception):
    """Raised when no user matches the given prefix."""

    def __init__(self, prefix: str):
        self.prefix = prefix
        super().__init__(f"No se encontró ningún usuario con prefijo '{prefix}'")


class TrackNotFoundError(Exception):
    """Raised when no track file exists for the given ID."""

    def __init__(self, track_id: str):
        self.track_id = track_id
        super().__init__(f"No se encontró la formación '{track_id}'")


def resolve_user_name(prefix: str, candidates: list[str]) -> str:
    """Pick the user a CLI argument refers to.

    A name that matches a declared user exactly always wins, so "Ana" still
    selects Ana when "Anabel" is declared too. Otherwise the argument must be
    the start of exactly one declared name.

    Args:
        prefix: Name typed on the command line (e.g., "Heb")
        candidates: Names of the users declared in the track file

    Raises:
        UserNotFoundError: If no declared name starts with `prefix`
        AmbiguousUserError: If several declared names start with `prefix`
    """
    if prefix in candidates:
        return prefix

    matches = [name for name in candidates if name.startswith(prefix)]
    if not matches:
        raise UserNotFoundError(prefix)
    if len(matches) > 1:
        raise AmbiguousUserError(prefix, matches)
    return matches[0]


def get_available_track_ids(tracks_dir: Path) -> list[str]:
    """Get sorted list of track IDs (YAML file stems) in tracks_dir."""
    if not tracks_dir.exists():
        return []

    return sorted(
        p.stem
        for p in tracks_dir.glob("*.yaml")
        if p.is_file() and not p.name.startswith(".")
    )


def track_path(track_id: str, tracks_dir: Path) -> Path:
    """Path of the YAML file for track_id.

    Raises:
        TrackNotFoundError: If the file does not exist
    """
    path = tracks_dir / f"{track_id}.yaml"
    if not path.exists():
        raise TrackNotFoundError(track_id)
    return path

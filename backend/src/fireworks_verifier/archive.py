"""Helpers for unpacking release archives."""

import tarfile
from pathlib import Path

from .logging import get_logger

logger = get_logger(__name__)

# Extraction filters exist from 3.12 and in 3.10.12 / 3.11.4 security releases
HAS_EXTRACTION_FILTER = hasattr(tarfile, "data_filter")


def _check_members_inside(members: list[tarfile.TarInfo], destination: Path) -> None:
    """Refuse members that would be written outside destination."""
    root = destination.resolve()
    for member in members:
        target = (root / member.name).resolve()
        if target != root and root not in target.parents:
            raise tarfile.TarError(f"Refusing to extract {member.name!r} outside {root}")
        if member.issym() or member.islnk():
            link_target = (target.parent / member.linkname).resolve()
            if link_target != root and root not in link_target.parents:
                raise tarfile.TarError(
                    f"Refusing to extract link {member.name!r} pointing outside {root}"
                )


def extract_tgz(archive_file: str | Path, destination_dir: str | Path) -> Path:
    """Unpack a gzip-compressed tar archive.

    Args:
        archive_file: Path to the .tgz file
        destination_dir: Directory to extract into (created if missing)

    Returns:
        The destination directory

    Raises:
        tarfile.TarError: If the archive is corrupt, not a gzip tarball,
            or holds entries that would land outside the destination
    """
    destination = Path(destination_dir)
    destination.mkdir(parents=True, exist_ok=True)

    with tarfile.open(archive_file, "r:gz") as tar:
        members = tar.getmembers()
        if HAS_EXTRACTION_FILTER:
            tar.extractall(destination, filter="data")
        else:
            _check_members_inside(members, destination)
            tar.extractall(destination)

    logger.info(f"Extracted {len(members)} entries from {archive_file} into {destination}")
    return destination

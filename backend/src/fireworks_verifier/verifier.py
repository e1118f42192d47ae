"""Verification of Fireworks layout output for a release.

Checks run in two phases. The existence phase confirms the output
directory and one JSON file per species. The comparison phase downloads
the previous release's Fireworks archive and flags any species file that
shrank by 5% or more. Problems are collected as messages and reported
together; failures to retrieve or unpack the previous archive propagate.
"""

import shutil
from dataclasses import dataclass
from pathlib import Path

from .archive import extract_tgz
from .config import get_settings
from .counts import greater_than_or_equal_to_5_percent_drop
from .logging import get_logger
from .species import expected_file_names
from .storage import StorageClient, get_storage

logger = get_logger(__name__)

PREVIOUS_RELEASE_FOLDER = "fireworks"


@dataclass(frozen=True)
class VerificationRun:
    """Arguments for a single verification run."""

    output_directory: Path
    release_number: int

    def __post_init__(self):
        if self.release_number < 1:
            raise ValueError(
                f"Release number must be a positive integer, got {self.release_number}"
            )
        object.__setattr__(self, "output_directory", Path(self.output_directory))

    @property
    def previous_release_number(self) -> int:
        return self.release_number - 1

    @property
    def previous_archive_name(self) -> str:
        return f"fireworks-v{self.previous_release_number}.tgz"

    @property
    def previous_archive_key(self) -> str:
        """S3 key of the previous release's Fireworks archive."""
        return (
            f"private/releases/{self.previous_release_number}/fireworks/data/"
            f"{self.previous_archive_name}"
        )

    def json_file_paths(self) -> list[Path]:
        return [self.output_directory / name for name in expected_file_names()]


class ReleaseOutputVerifier:
    """Verifies the Fireworks layout output of a release.

    Args:
        run: Output directory and release number to verify
        storage: Client used to fetch the previous release archive
            (defaults to the shared S3 client)
        work_dir: Where the previous archive is downloaded and unpacked
            (defaults to the configured work_dir)
    """

    def __init__(
        self,
        run: VerificationRun,
        storage: StorageClient | None = None,
        work_dir: str | Path | None = None,
    ):
        self.run = run
        self._storage = storage
        self.work_dir = Path(work_dir) if work_dir is not None else get_settings().work_dir

    @property
    def storage(self) -> StorageClient:
        if self._storage is None:
            self._storage = get_storage()
        return self._storage

    @property
    def previous_archive_path(self) -> Path:
        return self.work_dir / self.run.previous_archive_name

    def previous_json_file_path(self, json_file_path: Path) -> Path:
        return self.work_dir / PREVIOUS_RELEASE_FOLDER / json_file_path.name

    def verify(self) -> list[str]:
        """Run every check and return the error messages found.

        An empty list means the layout output is complete. A missing
        output directory is reported on its own; nothing else is checked.
        """
        error_messages = self.check_output_directory_exists()
        if not error_messages:
            error_messages.extend(self.check_json_files_exist())
            error_messages.extend(self.check_json_file_sizes())
        return error_messages

    def check_output_directory_exists(self) -> list[str]:
        output_directory = self.run.output_directory
        if not output_directory.exists():
            return [
                f"{output_directory} does not exist; "
                "Expected fireworks output files at this location"
            ]
        return []

    def check_json_files_exist(self) -> list[str]:
        return [
            f"File {json_file_path} does not exist"
            for json_file_path in self.run.json_file_paths()
            if not json_file_path.exists()
        ]

    def check_json_file_sizes(self) -> list[str]:
        """Compare each existing JSON file against the previous release."""
        self.fetch_previous_release()

        error_messages = []
        for json_file_path in self.run.json_file_paths():
            if not json_file_path.exists():
                continue

            previous_json_file_path = self.previous_json_file_path(json_file_path)
            if not previous_json_file_path.exists():
                error_messages.append(
                    f"Previous version JSON file {previous_json_file_path} "
                    "does not exist for comparison"
                )
                continue

            actual_size = json_file_path.stat().st_size
            expected_size = previous_json_file_path.stat().st_size
            logger.debug(
                f"Comparing {json_file_path.name}",
                extra={"actual_bytes": actual_size, "expected_bytes": expected_size},
            )

            if greater_than_or_equal_to_5_percent_drop(actual_size, expected_size):
                error_messages.append(
                    f"{json_file_path} has too small size "
                    f"(actual: {actual_size} bytes) "
                    f"(expected: {expected_size} bytes) - "
                    f"difference of {expected_size - actual_size} bytes"
                )

        return error_messages

    def fetch_previous_release(self) -> Path:
        """Download and unpack the previous release's Fireworks archive.

        Returns:
            Directory holding the previous release's JSON files
        """
        archive_path = self.previous_archive_path
        archive_path.unlink(missing_ok=True)

        # Files from an earlier run must not stand in for ones this archive lacks
        previous_release_dir = self.work_dir / PREVIOUS_RELEASE_FOLDER
        if previous_release_dir.exists():
            shutil.rmtree(previous_release_dir)

        self.work_dir.mkdir(parents=True, exist_ok=True)
        self.storage.fetch(self.run.previous_archive_key, archive_path)
        extract_tgz(archive_path, self.work_dir)

        return previous_release_dir

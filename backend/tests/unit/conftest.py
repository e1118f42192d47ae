"""Pytest fixtures for Fireworks verifier unit tests."""

import io
import shutil
import tarfile
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from fireworks_verifier.config import get_settings
from fireworks_verifier.species import SPECIES, expected_file_name


def write_sized_file(path: Path, size: int) -> Path:
    """Write a file of exactly `size` bytes."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size)
    return path


def build_fireworks_archive(archive_path: Path, sizes: dict[str, int]) -> Path:
    """Build a fireworks-v<n>.tgz holding fireworks/<name> entries of given sizes."""
    archive_path.parent.mkdir(parents=True, exist_ok=True)
    with tarfile.open(archive_path, "w:gz") as tar:
        for name, size in sizes.items():
            info = tarfile.TarInfo(name=f"fireworks/{name}")
            info.size = size
            tar.addfile(info, io.BytesIO(b"x" * size))
    return archive_path


@pytest.fixture
def build_archive():
    """Builder for fireworks archives: build_archive(path, {name: size})."""
    return build_fireworks_archive


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make each test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """An empty Fireworks output directory."""
    directory = tmp_path / "output"
    directory.mkdir()
    return directory


@pytest.fixture
def work_dir(tmp_path: Path) -> Path:
    """Working directory for the previous release archive."""
    directory = tmp_path / "work"
    directory.mkdir()
    return directory


@pytest.fixture
def previous_sizes() -> dict[str, int]:
    """Previous release sizes: 1000 bytes for every species."""
    return {expected_file_name(species): 1000 for species in SPECIES}


@pytest.fixture
def remote_archive(tmp_path: Path, previous_sizes: dict[str, int]) -> Path:
    """The previous release archive as stored in the bucket."""
    return build_fireworks_archive(tmp_path / "remote" / "archive.tgz", previous_sizes)


@pytest.fixture
def fake_storage(remote_archive: Path) -> MagicMock:
    """Storage client whose fetch copies the remote archive into place."""
    storage = MagicMock()

    def fetch(key, destination):
        shutil.copyfile(remote_archive, destination)
        return Path(destination)

    storage.fetch.side_effect = fetch
    return storage


@pytest.fixture
def populate_output(output_dir: Path):
    """Write current release files; returns a function taking {name: size}."""

    def populate(sizes: dict[str, int]) -> Path:
        for name, size in sizes.items():
            write_sized_file(output_dir / name, size)
        return output_dir

    return populate

"""Shared fixtures for dirscan tests."""

import os
from pathlib import Path

import pytest

from tests.support.fs_utils import create_files


@pytest.fixture
def scanner_files(tmp_path: Path) -> Path:
    """Five flat files scanner1.dat .. scanner5.dat."""
    create_files(tmp_path, *(f"scanner{i}.dat" for i in range(1, 6)))
    return tmp_path


@pytest.fixture
def directory_test(tmp_path: Path) -> Path:
    """
    Directories with hyphens and underscores, one file1.dat in each.

    Structure:
        tmp_path/
        └── directoryTest/
            ├── testDir123/file1.dat
            ├── test_dir_123/file1.dat
            └── test-dir-123/file1.dat
    """
    create_files(
        tmp_path,
        "directoryTest/testDir123/file1.dat",
        "directoryTest/test_dir_123/file1.dat",
        "directoryTest/test-dir-123/file1.dat",
    )
    return tmp_path


@pytest.fixture
def symlink_tree(tmp_path: Path) -> Path:
    """
    Tree mixing regular entries with file and directory symlinks.

    Structure:
        tmp_path/
        ├── dirOnTheOutside/FileInDirOnTheOutside.txt
        ├── fileOnTheOutside.txt
        └── src/                                 (returned)
            ├── aRegularDir/aRegularFile.txt
            ├── targetDir/targetFile.txt
            ├── fileR.txt, fileW.txt, fileX.txt
            ├── symR -> fileR.txt, symW -> fileW.txt, symX -> fileX.txt
            ├── symDir -> targetDir
            ├── symLinkToFileOnTheOutside -> ../fileOnTheOutside.txt
            └── symLinkToDirOnTheOutside -> ../dirOnTheOutside
    """
    create_files(
        tmp_path,
        "dirOnTheOutside/FileInDirOnTheOutside.txt",
        "fileOnTheOutside.txt",
        "src/aRegularDir/aRegularFile.txt",
        "src/targetDir/targetFile.txt",
        "src/fileR.txt",
        "src/fileW.txt",
        "src/fileX.txt",
    )
    src = tmp_path / "src"
    links = [
        ("symR", "fileR.txt", False),
        ("symW", "fileW.txt", False),
        ("symX", "fileX.txt", False),
        ("symDir", "targetDir", True),
        ("symLinkToFileOnTheOutside", os.path.join("..", "fileOnTheOutside.txt"), False),
        ("symLinkToDirOnTheOutside", os.path.join("..", "dirOnTheOutside"), True),
    ]
    try:
        for name, target, is_dir in links:
            os.symlink(target, src / name, target_is_directory=is_dir)
    except (OSError, NotImplementedError) as e:
        pytest.skip(f"Symlinks not supported here: {e}")
    return src

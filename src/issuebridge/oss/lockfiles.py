"""Lockfile → manifest remapping for SCA target files."""

from __future__ import annotations

import os

LOCKFILE_TO_MANIFEST: dict[str, str] = {
    "Gemfile.lock": "Gemfile",
    "package-lock.json": "package.json",
    "yarn.lock": "package.json",
    "Gopkg.lock": "Gopkg.toml",
    "go.sum": "go.mod",
    "composer.lock": "composer.json",
    "Podfile.lock": "Podfile",
    "poetry.lock": "pyproject.toml",
}


def manifest_for(display_target_file: str) -> str:
    """Swap a lockfile name for its manifest; other paths are returned as-is."""
    directory, name = os.path.split(display_target_file)
    manifest = LOCKFILE_TO_MANIFEST.get(name)
    if manifest is None:
        return display_target_file
    return os.path.join(directory, manifest) if directory else manifest


def target_file_path(work_dir: str, display_target_file: str) -> str:
    """Absolute path of the manifest behind *display_target_file*."""
    path = manifest_for(display_target_file)
    if not path or os.path.isabs(path) or not work_dir:
        return path
    return os.path.normpath(os.path.join(work_dir, path))

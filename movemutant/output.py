"""Placement of mutant files and preparation of the output directory."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Union

from movemutant.cli import DEFAULT_OUTPUT_DIR
from movemutant.configuration import Configuration

log = logging.getLogger(__name__)

PathLike = Union[str, Path]

MANIFEST_NAME = "Move.toml"
SOURCES_DIR = "sources"


def find_package_root(path: PathLike) -> Path:
    """Return the nearest directory at or above ``path`` holding a package manifest.

    Raises FileNotFoundError when ``path`` does not exist or no manifest is found.
    """
    current = Path(path).resolve(strict=True)
    while not (current / MANIFEST_NAME).is_file():
        if current.parent == current:
            raise FileNotFoundError(
                f"unable to find package manifest in {path} or in its parents"
            )
        current = current.parent
    return current


def setup_mutant_path(
    output_dir: PathLike, original_file: PathLike, unique_mutant_id: int
) -> Path:
    """Create the directories for a mutant of ``original_file`` and return its path.

    For a file inside a package the path relative to the package's ``sources``
    directory is kept below ``output_dir``; a file outside any package is placed
    directly in ``output_dir``. The mutant is named ``<stem>_mutant_<id hex>.move``.
    """
    original = Path(original_file)
    log.debug("Trying to set up mutant path for %s", original)

    if not str(original_file) or not original.name:
        raise ValueError(f"Cannot get file stem of {str(original_file)!r}")

    canonical = original.resolve(strict=True)

    try:
        root_path = find_package_root(canonical) / SOURCES_DIR
    except FileNotFoundError:
        log.debug(
            "No package root for %s. Assuming mutating a single file.", canonical
        )
        root_path = canonical

    relative = canonical.relative_to(root_path)
    output_struct = Path(output_dir) / relative.parent

    try:
        output_struct.mkdir(parents=True, exist_ok=True)
    except FileExistsError:
        pass
    except OSError as error:
        raise OSError(
            f"Cannot create directory structure for {original} in {output_dir}"
        ) from error

    return output_struct / f"{original.stem}_mutant_{unique_mutant_id:x}.move"


def setup_output_dir(configuration: Configuration) -> Path:
    """Create a fresh output directory for the mutants and return its path.

    Raises FileExistsError when the directory exists and overwriting is disabled.
    """
    output_dir = configuration.project.out_mutant_dir
    if output_dir is None:
        output_dir = Path(DEFAULT_OUTPUT_DIR)
    output_dir = Path(output_dir)
    log.debug("Trying to set up output directory to: %s", output_dir)

    if output_dir.exists() and configuration.project.no_overwrite:
        raise FileExistsError(
            "Output directory already exists and --no-overwrite flag was used."
        )

    shutil.rmtree(output_dir, ignore_errors=True)
    output_dir.mkdir()

    log.info("Output directory set to: %s", output_dir)
    return output_dir
"""File-backed lab catalog and step markdown."""

import json
from functools import lru_cache
from pathlib import Path, PurePosixPath

import structlog

from labpages_core.errors import ContentNotFoundError, ContentPathError

from app.schemas.api import LabResponse
from app.settings import settings

logger = structlog.get_logger()


def check_step_path(file: str) -> PurePosixPath:
    """Reject step paths that could leave the steps directory.

    Raises:
        ContentPathError: If the path is empty, absolute or contains ``..``
    """
    if not file:
        raise ContentPathError("File parameter is required")
    if ".." in file or file.startswith("/") or file.startswith("\\"):
        raise ContentPathError(f"Invalid file path: {file}")
    return PurePosixPath(file)


def read_step(file: str, steps_dir: Path | None = None) -> str:
    """Read one step's markdown from the steps directory.

    Args:
        file: Path relative to the steps directory, e.g. ``network-link-v2/step1.md``
        steps_dir: Override for ``settings.steps_dir``

    Returns:
        The raw markdown text

    Raises:
        ContentPathError: For paths outside the steps directory
        ContentNotFoundError: If no such file exists
    """
    relative = check_step_path(file)
    root = (steps_dir or settings.steps_dir).resolve()
    full_path = root.joinpath(*relative.parts).resolve()

    if not full_path.is_relative_to(root):
        logger.warning("step_path_escapes_root", file=file)
        raise ContentPathError(f"Invalid file path: {file}")
    if not full_path.is_file():
        logger.info("step_not_found", file=file)
        raise ContentNotFoundError(f"File not found: {file}")

    content = full_path.read_text(encoding="utf-8")
    logger.info("step_loaded", file=file, length=len(content))
    return content


@lru_cache(maxsize=4)
def _load_labs(labs_file: Path) -> tuple[LabResponse, ...]:
    data = json.loads(labs_file.read_text(encoding="utf-8"))
    labs = tuple(LabResponse.model_validate(lab) for lab in data["labs"])
    logger.info("labs_loaded", path=str(labs_file), count=len(labs))
    return labs


def list_labs(labs_file: Path | None = None) -> list[LabResponse]:
    """Return every configured lab in catalog order."""
    return list(_load_labs(labs_file or settings.labs_file))


def get_lab(lab_id: str, labs_file: Path | None = None) -> LabResponse | None:
    """Return one lab by id, or None."""
    for lab in _load_labs(labs_file or settings.labs_file):
        if lab.id == lab_id:
            return lab
    return None

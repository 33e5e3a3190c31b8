"""Module file discovery under the module root."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from barrelcheck.domain.exceptions import ScanError, ValidationCancelled

if TYPE_CHECKING:
    import threading
    from collections.abc import Iterable

    from barrelcheck.domain.model.configuration import ValidatorConfig

logger = logging.getLogger(__name__)


def scan_module_files(
    module_root: Path,
    config: ValidatorConfig,
    *,
    cancel: threading.Event | None = None,
) -> tuple[Path, ...]:
    """Find every eligible module file beneath module_root.

    Walks the whole tree first and filters afterwards, so directories that
    hold only excluded files are still descended. Symlinks are neither
    followed nor reported.

    Args:
        module_root: Directory to scan
        config: Extensions and exclusion rules
        cancel: Checked before each directory listing

    Returns:
        Sorted tuple of absolute file paths. Empty if module_root is missing.

    Raises:
        ScanError: If a directory cannot be listed
        ValidationCancelled: If cancel is set during the walk

    Example:
        >>> scan_module_files(Path("src/ai-studio"), ValidatorConfig())
        (PosixPath('src/ai-studio/utils/greet.ts'),)
    """
    if not module_root.is_dir():
        logger.debug("module root %s is not a directory, nothing to scan", module_root)
        return ()

    candidates = _walk(module_root, config.extensions, cancel)
    aggregator = module_root / config.aggregator

    return tuple(
        sorted(path for path in candidates if path != aggregator and _is_eligible(path, config))
    )


def relative_paths(files: Iterable[Path], module_root: Path) -> tuple[str, ...]:
    """POSIX paths of files relative to module_root, in input order."""
    return tuple(path.relative_to(module_root).as_posix() for path in files)


def _walk(
    directory: Path,
    extensions: tuple[str, ...],
    cancel: threading.Event | None,
) -> list[Path]:
    """Collect every file with a source extension, depth first."""
    if cancel is not None and cancel.is_set():
        raise ValidationCancelled(directory)

    try:
        entries = sorted(directory.iterdir())
    except OSError as e:
        raise ScanError(path=directory, reason=e.strerror or str(e)) from e

    logger.debug("scanning %s (%d entries)", directory, len(entries))

    found: list[Path] = []
    for entry in entries:
        if entry.is_symlink():
            continue
        if entry.is_dir():
            found.extend(_walk(entry, extensions, cancel))
        elif entry.is_file() and entry.name.endswith(extensions):
            found.append(entry)
    return found


def _is_eligible(path: Path, config: ValidatorConfig) -> bool:
    """Exclusion rules: declarations-only modules and documentation files."""
    name = path.name
    if name.endswith(config.declaration_suffixes):
        return False
    return not any(marker in name for marker in config.doc_markers)

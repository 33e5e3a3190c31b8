"""Test factories for creating domain objects and project trees.

Centralized factory functions to avoid duplication across test modules.
"""

from collections.abc import Mapping
from pathlib import Path

from barrelcheck.domain.model.check_context import CheckContext
from barrelcheck.domain.model.configuration import ValidatorConfig
from barrelcheck.domain.model.enums import FindingCategory, Severity
from barrelcheck.domain.model.finding import Finding
from barrelcheck.domain.model.validation_result import ValidationResult

# Aggregator text declaring both default sentinels and nothing else
SENTINELS = 'export const AI_STUDIO_VERSION = "1.0.0";\nexport const AI_STUDIO_SYNCED_AT = "2025-12-29";\n'


def write_tree(root: Path, files: Mapping[str, str]) -> Path:
    """Write files (relative POSIX path → content) under root.

    Args:
        root: Directory to create files in
        files: Relative path to file content

    Returns:
        root
    """
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


def make_project(
    root: Path,
    index: str | None,
    files: Mapping[str, str] | None = None,
    module_dir: str = "src/ai-studio",
) -> Path:
    """Create a project with a module directory and optional aggregator.

    Args:
        root: Project root (usually tmp_path)
        index: Aggregator (index.ts) content. None = no aggregator.
        files: Module files relative to the module directory
        module_dir: Module directory relative to root

    Returns:
        Module directory path
    """
    module_root = root / module_dir
    module_root.mkdir(parents=True, exist_ok=True)
    if index is not None:
        (module_root / "index.ts").write_text(index, encoding="utf-8")
    write_tree(module_root, files or {})
    return module_root


def make_context(
    module_root: Path,
    *,
    exports: tuple[str, ...] = (),
    files: tuple[str, ...] = (),
    content: str = SENTINELS,
    config: ValidatorConfig | None = None,
) -> CheckContext:
    """Create a CheckContext for tests."""
    return CheckContext(
        module_root=module_root,
        aggregator_content=content,
        exports=exports,
        files=files,
        config=config or ValidatorConfig(),
    )


def make_finding(
    message: str = "something is off",
    severity: Severity = Severity.WARNING,
    category: FindingCategory = FindingCategory.ORPHAN_FILE,
    subject: str = "a.ts",
) -> Finding:
    """Create a Finding for tests."""
    return Finding(severity=severity, category=category, subject=subject, message=message)


def make_error(message: str = 'Export "x" references non-existent module') -> Finding:
    """Create an ERROR finding for a dangling export."""
    return make_finding(
        message=message,
        severity=Severity.ERROR,
        category=FindingCategory.DANGLING_EXPORT,
        subject="x",
    )


def make_result(
    *findings: Finding,
    exports: tuple[str, ...] = (),
    files: tuple[str, ...] = (),
    metadata: Mapping[str, str] | None = None,
) -> ValidationResult:
    """Create a ValidationResult for tests."""
    return ValidationResult(
        findings=findings,
        exports=exports,
        files=files,
        metadata=metadata or {},
    )

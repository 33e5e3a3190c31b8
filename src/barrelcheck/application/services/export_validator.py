"""Main facade for export surface validation.

ExportValidator is the primary entry point: scan, extract, cross-reference,
report. Composition-based: accepts extractor, checks and reporter.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from barrelcheck.application.checks import default_checks
from barrelcheck.application.discovery import relative_paths, scan_module_files
from barrelcheck.domain.exceptions import AggregatorReadError
from barrelcheck.domain.model.check_context import CheckContext
from barrelcheck.domain.model.configuration import ValidatorConfig
from barrelcheck.domain.model.enums import FindingCategory, Severity
from barrelcheck.domain.model.finding import Finding
from barrelcheck.domain.model.validation_result import ValidationResult
from barrelcheck.infrastructure.adapters.regex_extractor import RegexExportExtractor

if TYPE_CHECKING:
    import threading

    from barrelcheck.domain.ports.check import CheckProtocol
    from barrelcheck.domain.ports.export_extractor import ExportExtractorPort
    from barrelcheck.domain.ports.reporter import ReporterProtocol

logger = logging.getLogger(__name__)


class ExportValidator:
    """Main facade for export surface validation.

    Stateless between validate() calls: each call rescans the tree and
    rereads the aggregator. Expected inconsistencies are returned as
    findings; only unexpected I/O failures raise.

    Example:
        validator = ExportValidator()
        result = validator.validate(Path("."))
        if not result.valid:
            print(result.errors)
    """

    def __init__(
        self,
        config: ValidatorConfig | None = None,
        *,
        extractor: ExportExtractorPort | None = None,
        checks: Sequence[CheckProtocol] | None = None,
        reporter: ReporterProtocol | None = None,
    ) -> None:
        """Initialize validator with dependencies.

        Args:
            config: Layout and rules. Defaults if None.
            extractor: Export extractor. RegexExportExtractor if None.
            checks: Checks to run, in order. Built-in checks if None.
            reporter: Optional reporter called with every result
        """
        self._config = config or ValidatorConfig()
        self._extractor = extractor or RegexExportExtractor()
        self._checks = tuple(checks) if checks is not None else default_checks()
        self._reporter = reporter

    @property
    def config(self) -> ValidatorConfig:
        """Active configuration."""
        return self._config

    def validate(
        self,
        root_dir: Path | None = None,
        *,
        cancel: threading.Event | None = None,
    ) -> ValidationResult:
        """Validate the export surface below a project root.

        Args:
            root_dir: Project root. Current working directory if None.
            cancel: Checked between directory traversals

        Returns:
            ValidationResult with findings, exports and files

        Raises:
            ScanError: If a directory cannot be listed
            AggregatorReadError: If the aggregator cannot be read
            ValidationCancelled: If cancel is set during scanning
        """
        start = time.perf_counter()
        result = self._run(root_dir if root_dir is not None else Path.cwd(), cancel)
        logger.debug(
            "validated %d file(s), %d export(s): %d error(s), %d warning(s) in %.1f ms",
            len(result.files),
            len(result.exports),
            result.error_count,
            result.warning_count,
            (time.perf_counter() - start) * 1000,
        )

        if self._reporter is not None:
            self._reporter.report(result)

        return result

    def _run(self, root_dir: Path, cancel: threading.Event | None) -> ValidationResult:
        """Structural checks, then the consistency checks."""
        config = self._config
        module_root = config.module_root(root_dir)
        aggregator_path = module_root / config.aggregator

        if not module_root.exists():
            return ValidationResult.aborted(
                Finding(
                    severity=Severity.ERROR,
                    category=FindingCategory.MISSING_ROOT,
                    subject=str(module_root),
                    message=(
                        f"{module_root.name} folder does not exist at "
                        f"{config.module_dir.as_posix()}/"
                    ),
                )
            )

        if not aggregator_path.exists():
            return ValidationResult.aborted(
                Finding(
                    severity=Severity.ERROR,
                    category=FindingCategory.MISSING_AGGREGATOR,
                    subject=str(aggregator_path),
                    message=f"{module_root.name}/{config.aggregator} does not exist",
                )
            )

        content = _read_aggregator(aggregator_path)
        exports = self._extractor.extract_exports(content)
        files = relative_paths(scan_module_files(module_root, config, cancel=cancel), module_root)

        context = CheckContext(
            module_root=module_root,
            aggregator_content=content,
            exports=exports,
            files=files,
            config=config,
        )

        findings: list[Finding] = []
        for check in self._checks:
            findings.extend(check.check(context))

        metadata = self._extractor.extract_constant_values(
            content, (s.name for s in config.sentinels)
        )

        return ValidationResult(
            findings=tuple(findings),
            exports=exports,
            files=files,
            metadata=metadata,
        )


def validate_exports(
    root_dir: Path | None = None,
    config: ValidatorConfig | None = None,
    *,
    cancel: threading.Event | None = None,
) -> ValidationResult:
    """Validate with built-in checks and the regex extractor.

    Args:
        root_dir: Project root override. Current working directory if None.
        config: Layout and rules. Defaults if None.
        cancel: Optional cancellation event

    Returns:
        Full ValidationResult; inspect `valid`, `errors` and `warnings`
    """
    return ExportValidator(config).validate(root_dir, cancel=cancel)


def _read_aggregator(path: Path) -> str:
    """Read aggregator text as UTF-8."""
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise AggregatorReadError(path=path, reason=f"encoding error: {e}") from e
    except OSError as e:
        raise AggregatorReadError(path=path, reason=e.strerror or str(e)) from e

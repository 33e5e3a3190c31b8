"""Domain ports: interfaces implemented by outer layers."""

from barrelcheck.domain.ports.check import CheckProtocol
from barrelcheck.domain.ports.export_extractor import ExportExtractorPort
from barrelcheck.domain.ports.reporter import ReporterProtocol

__all__ = [
    "CheckProtocol",
    "ExportExtractorPort",
    "ReporterProtocol",
]

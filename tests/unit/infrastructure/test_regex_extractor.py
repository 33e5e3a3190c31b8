"""Tests for adapters/regex_extractor.py."""

import pytest

from barrelcheck.domain.ports.export_extractor import ExportExtractorPort
from barrelcheck.infrastructure.adapters.regex_extractor import RegexExportExtractor


@pytest.fixture
def extractor() -> RegexExportExtractor:
    """Fresh extractor."""
    return RegexExportExtractor()


class TestExtractExports:
    """Tests for RegexExportExtractor.extract_exports."""

    def test_implements_port(self, extractor: RegexExportExtractor) -> None:
        """Extractor satisfies the port."""
        assert isinstance(extractor, ExportExtractorPort)

    def test_wildcard_form(self, extractor: RegexExportExtractor) -> None:
        """export * from './x'."""
        assert extractor.extract_exports("export * from './utils/greet';") == ("utils/greet",)

    def test_named_form(self, extractor: RegexExportExtractor) -> None:
        """export { a, b } from "./x"."""
        content = 'export { greet, getAIStudioInfo } from "./utils/greet";'

        assert extractor.extract_exports(content) == ("utils/greet",)

    def test_multiline_named_form(self, extractor: RegexExportExtractor) -> None:
        """Named lists may span lines."""
        content = "export {\n  greet,\n  farewell,\n} from './utils/greet';"

        assert extractor.extract_exports(content) == ("utils/greet",)

    def test_single_identifier_form(self, extractor: RegexExportExtractor) -> None:
        """export name from './x'."""
        assert extractor.extract_exports("export Widget from './Widget';") == ("Widget",)

    def test_order_preserved(self, extractor: RegexExportExtractor) -> None:
        """Targets come back in order of appearance."""
        content = "export * from './b';\nexport { x } from './a';\nexport * from './c';\n"

        assert extractor.extract_exports(content) == ("b", "a", "c")

    def test_duplicates_kept(self, extractor: RegexExportExtractor) -> None:
        """No de-duplication."""
        content = "export * from './a';\nexport { y } from './a';\n"

        assert extractor.extract_exports(content) == ("a", "a")

    def test_package_reexports_ignored(self, extractor: RegexExportExtractor) -> None:
        """Non-relative targets are not part of the surface."""
        content = "export * from 'react';\nexport { z } from \"zod\";\nexport * from './a';"

        assert extractor.extract_exports(content) == ("a",)

    def test_parent_relative_ignored(self, extractor: RegexExportExtractor) -> None:
        """Only same-directory-relative targets count."""
        assert extractor.extract_exports("export * from '../outside';") == ()

    def test_local_declarations_ignored(self, extractor: RegexExportExtractor) -> None:
        """Plain exports without a from clause are not re-exports."""
        content = 'export const AI_STUDIO_VERSION = "1.0.0";\nexport function f() {}\n'

        assert extractor.extract_exports(content) == ()

    def test_imports_ignored(self, extractor: RegexExportExtractor) -> None:
        """Import statements are not re-exports."""
        assert extractor.extract_exports("import { a } from './a';") == ()

    def test_empty_content(self, extractor: RegexExportExtractor) -> None:
        """No matches is an empty tuple, not an error."""
        assert extractor.extract_exports("") == ()

    def test_commented_out_export_still_matched(self, extractor: RegexExportExtractor) -> None:
        """Extraction is textual: comments are not stripped."""
        content = '// Example: export * from "./some-module";\n'

        assert extractor.extract_exports(content) == ("some-module",)


class TestExtractConstantValues:
    """Tests for RegexExportExtractor.extract_constant_values."""

    def test_double_and_single_quotes(self, extractor: RegexExportExtractor) -> None:
        """Both quote styles are read."""
        content = (
            'export const AI_STUDIO_VERSION = "1.0.0";\n'
            "export const AI_STUDIO_SYNCED_AT = '2025-12-29T13:02:57Z';\n"
        )

        values = extractor.extract_constant_values(
            content, ["AI_STUDIO_VERSION", "AI_STUDIO_SYNCED_AT"]
        )

        assert dict(values) == {
            "AI_STUDIO_VERSION": "1.0.0",
            "AI_STUDIO_SYNCED_AT": "2025-12-29T13:02:57Z",
        }

    def test_missing_constant_absent(self, extractor: RegexExportExtractor) -> None:
        """Names without a literal are left out."""
        values = extractor.extract_constant_values("const X = compute();", ["X", "Y"])

        assert dict(values) == {}

    def test_name_boundary(self, extractor: RegexExportExtractor) -> None:
        """A longer identifier ending with the name does not match."""
        values = extractor.extract_constant_values('const MY_VERSION = "9";', ["VERSION"])

        assert dict(values) == {}

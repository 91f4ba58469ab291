"""
Marker Editor Unit Tests
Anchor lookup, insertion placement and removal on strings and real files
"""

from unittest.mock import patch

import pytest

from mantra.cli.utils.marker_editor import (
    EditOptions,
    insert_text,
    insert_to_file,
    remove_from_file,
    remove_text,
)
from mantra.utils.core.errors import AnchorNotFoundError


class TestEditOptions:
    """EditOptions 생성 및 검증 테스트."""

    def test_before_and_after_are_exclusive(self):
        """Test giving both anchors is rejected."""
        with pytest.raises(ValueError):
            EditOptions(before="a", after="b")

    def test_occurrence_must_be_positive(self):
        """Test occurrence is 1-based."""
        with pytest.raises(ValueError):
            EditOptions(after="a", occurrence=0)

    def test_from_dict_with_fallbacks(self):
        """Test dict options, including 'or' fallbacks, are converted."""
        options = EditOptions.from_dict(
            {"after": "a", "as_new_line": True, "or": [{"before": "b"}]}
        )

        assert options.after == "a"
        assert options.as_new_line is True
        assert options.fallbacks == (EditOptions(before="b"),)

    def test_from_dict_rejects_unknown_keys(self):
        """Test misspelled options fail loudly."""
        with pytest.raises(ValueError, match="Unknown edit option"):
            EditOptions.from_dict({"afterr": "a"})


class TestInsertText:
    """insert_text 배치 규칙 테스트."""

    def test_insert_after_anchor_line(self):
        """Test 'after' inserts at the start of the line following the anchor."""
        assert insert_text("ANCHOR\n", "X", {"after": "ANCHOR"}) == "ANCHOR\nX"

    def test_insert_after_anchor_in_middle(self):
        """Test 'after' skips to the end of the anchor's line."""
        content = "import a;\nimport b;\n\nrun();\n"

        result = insert_text(content, "import c;\n", EditOptions(after="import b"))

        assert result == "import a;\nimport b;\nimport c;\n\nrun();\n"

    def test_insert_before_anchor_line(self):
        """Test 'before' inserts at the start of the anchor's line."""
        content = "one\n  // ANCHOR\nthree\n"

        result = insert_text(content, "two\n", EditOptions(before="ANCHOR"))

        assert result == "one\ntwo\n  // ANCHOR\nthree\n"

    def test_insert_after_last_line_without_line_break(self):
        """Test a line break is added when the anchor line ends the file."""
        assert insert_text("a\nANCHOR", "X", EditOptions(after="ANCHOR")) == "a\nANCHOR\nX"

    def test_insert_after_last_line_uses_file_line_break(self):
        """Test the added break follows the file's own CRLF convention."""
        with patch("mantra.cli.utils.marker_editor.get_line_break", return_value="\n"):
            result = insert_text("a\r\nANCHOR", "X", EditOptions(after="ANCHOR"))

        assert result == "a\r\nANCHOR\r\nX"

    def test_insert_inline(self):
        """Test inline insertion splices at the exact match boundary."""
        content = "export default { a };\n"

        assert insert_text(content, " b,", EditOptions(after="{", inline=True)) == (
            "export default { b, a };\n"
        )
        assert insert_text(content, "/*x*/", EditOptions(before="{", inline=True)) == (
            "export default /*x*/{ a };\n"
        )

    def test_as_new_line_appends_line_break(self):
        """Test as_new_line terminates the payload with the file's line break."""
        result = insert_text("a\r\nb\r\n", "X", EditOptions(after="a", as_new_line=True))

        assert result == "a\r\nX\r\nb\r\n"

    def test_as_new_line_keeps_existing_line_break(self):
        """Test as_new_line does not double an existing trailing break."""
        result = insert_text("a\nb\n", "X\n", EditOptions(after="a", as_new_line=True))

        assert result == "a\nX\nb\n"

    def test_anchor_ending_with_line_break(self):
        """Test an anchor that already includes its line break."""
        assert insert_text("a\nb\n", "X\n", EditOptions(after="a\n")) == "a\nX\nb\n"

    def test_occurrence_and_last(self):
        """Test choosing the n-th or last anchor occurrence."""
        content = "m\nm\nm\n"

        assert insert_text(content, "X\n", EditOptions(after="m", occurrence=2)) == "m\nm\nX\nm\n"
        assert insert_text(content, "X\n", EditOptions(after="m", last=True)) == "m\nm\nm\nX\n"

    def test_occurrence_beyond_matches_is_not_found(self):
        """Test asking for a missing occurrence fails."""
        with pytest.raises(AnchorNotFoundError):
            insert_text("m\n", "X", EditOptions(after="m", occurrence=2))

    def test_regex_anchor(self):
        """Test regular-expression anchors."""
        content = "import React from 'react';\nimport { Foo } from './foo';\n\nrender();\n"

        options = EditOptions(after=r"^import .*$", regex=True, last=True)

        result = insert_text(content, "import Bar from './bar';\n", options)

        assert result == (
            "import React from 'react';\nimport { Foo } from './foo';\n"
            "import Bar from './bar';\n\nrender();\n"
        )

    def test_literal_anchor_is_not_a_pattern(self):
        """Test exact-substring anchors do not interpret regex metacharacters."""
        assert insert_text("a.b\naxb\n", "X\n", EditOptions(after="a.b", last=True)) == (
            "a.b\nX\naxb\n"
        )

    def test_fallback_anchor(self):
        """Test fallbacks are tried in order when the primary anchor is absent."""
        options = EditOptions(after="MISSING", fallbacks=(EditOptions(before="end"),))

        assert insert_text("start\nend\n", "mid\n", options) == "start\nmid\nend\n"

    def test_missing_anchor_raises(self):
        """Test an absent anchor is fatal instead of a silent no-op."""
        with pytest.raises(AnchorNotFoundError) as exc_info:
            insert_text(
                "content\n",
                "X",
                EditOptions(after="MISSING", fallbacks=(EditOptions(after="NOPE"),)),
            )

        assert exc_info.value.pattern == "MISSING"

    def test_insert_requires_anchor(self):
        """Test insert without before/after is a usage error."""
        with pytest.raises(ValueError):
            insert_text("content\n", "X", None)


class TestRemoveText:
    """remove_text 테스트."""

    def test_remove_first_occurrence(self):
        """Test the first occurrence is removed by default."""
        assert remove_text("a X b X", "X") == "a  b X"

    def test_remove_last_occurrence(self):
        """Test 'last' removes the final occurrence."""
        assert remove_text("a X b X", "X", {"last": True}) == "a X b "

    def test_remove_all_occurrences(self):
        """Test 'multi' removes every occurrence."""
        assert remove_text("X1X2X", "X", EditOptions(multi=True)) == "12"

    def test_remove_scoped_after_anchor(self):
        """Test 'after' limits removal to text following the anchor."""
        content = "item\n// generated\nitem\n"

        assert remove_text(content, "item\n", EditOptions(after="// generated\n")) == (
            "item\n// generated\n"
        )

    def test_remove_scoped_before_anchor(self):
        """Test 'before' limits removal to text preceding the anchor."""
        content = "x;\n// end\nx;\n"

        assert remove_text(content, "x;\n", EditOptions(before="// end", multi=True)) == (
            "// end\nx;\n"
        )

    def test_remove_regex(self):
        """Test pattern removal."""
        content = "import a from 'a';\nimport b from 'b';\nrun();\n"

        result = remove_text(content, r"^import b .*\n", EditOptions(regex=True))

        assert result == "import a from 'a';\nrun();\n"

    def test_remove_missing_text_raises(self):
        """Test removing absent text is fatal."""
        with pytest.raises(AnchorNotFoundError):
            remove_text("content", "X")

    def test_remove_missing_scope_anchor_raises(self):
        """Test a missing scope anchor is fatal."""
        with pytest.raises(AnchorNotFoundError) as exc_info:
            remove_text("X", "X", EditOptions(after="MISSING"))

        assert exc_info.value.pattern == "MISSING"


class TestFileEdits:
    """insert_to_file / remove_from_file 파일 편집 테스트."""

    def test_insert_to_file(self, tmp_path):
        """Test the file is rewritten with the inserted text."""
        target = tmp_path / "main.js"
        target.write_text("ANCHOR\n")

        insert_to_file(target, "X", {"after": "ANCHOR"})

        assert target.read_text() == "ANCHOR\nX"

    def test_insert_missing_anchor_leaves_file_untouched(self, tmp_path):
        """Test a failed insert does not modify the file and names it."""
        target = tmp_path / "main.js"
        target.write_text("content\n")

        with pytest.raises(AnchorNotFoundError) as exc_info:
            insert_to_file(target, "X", EditOptions(after="MISSING"))

        assert target.read_text() == "content\n"
        assert exc_info.value.path == str(target)
        assert str(target) in str(exc_info.value)

    def test_remove_then_insert_round_trip(self, tmp_path):
        """Test removing a marker then inserting it back restores the file."""
        target = tmp_path / "routes.js"
        original = "import a;\n// ROUTES\nroute('a');\nexport default routes;\n"
        target.write_text(original)

        remove_from_file(target, "route('a');\n")
        assert target.read_text() == "import a;\n// ROUTES\nexport default routes;\n"

        insert_to_file(target, "route('a');\n", EditOptions(after="// ROUTES"))
        assert target.read_text() == original

    def test_crlf_file_preserved(self, tmp_path):
        """Test Windows line breaks are kept when rewriting a file."""
        target = tmp_path / "win.js"
        target.write_bytes(b"a\r\nb\r\n")

        insert_to_file(target, "X", EditOptions(after="a", as_new_line=True))

        assert target.read_bytes() == b"a\r\nX\r\nb\r\n"

    def test_missing_file_propagates(self, tmp_path):
        """Test editing a non-existent file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            remove_from_file(tmp_path / "missing.js", "X")

    def test_line_break_for_empty_anchor_line_uses_platform(self, tmp_path):
        """Test files without any line break fall back to the platform convention."""
        target = tmp_path / "one_line.js"
        target.write_text("ANCHOR")

        with patch("mantra.cli.utils.marker_editor.get_line_break", return_value="\r\n"):
            insert_to_file(target, "X", EditOptions(after="ANCHOR"))

        assert target.read_bytes() == b"ANCHOR\r\nX"

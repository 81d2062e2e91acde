"""Tests for clipboard payload construction."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from ai_clipboard.export import (
    FEEDBACK_COPIED,
    FEEDBACK_NONE,
    build_export,
    display_path,
    read_text,
    render_block,
)
from ai_clipboard.file_tree_model import TreeNode
from ai_clipboard.selection import set_all


class DisplayPathTests(unittest.TestCase):
    def test_joins_root_name_with_relative_path(self) -> None:
        root = Path("/home/me/proj")
        self.assertEqual(display_path(root, root / "src" / "main.txt"), str(Path("proj/src/main.txt")))

    def test_filesystem_root_uses_full_root_text(self) -> None:
        self.assertEqual(display_path(Path("/"), Path("/etc/hosts")), str(Path("/etc/hosts")))


class RenderTests(unittest.TestCase):
    def test_block_wraps_contents_in_markers(self) -> None:
        self.assertEqual(
            render_block("proj/a.txt", "hello"),
            "### START proj/a.txt\nhello\n### END proj/a.txt\n\n",
        )

    def test_read_text_falls_back_to_latin1(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "legacy.txt"
            target.write_bytes("caf\xe9".encode("latin-1"))
            self.assertEqual(read_text(target), "caf\xe9")

    def test_read_text_keeps_crlf_line_endings(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "win.txt"
            target.write_bytes(b"line1\r\nline2\r\n")
            self.assertEqual(read_text(target), "line1\r\nline2\r\n")

    def test_read_text_strips_utf8_bom(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "bom.txt"
            target.write_bytes(b"\xef\xbb\xbfhi")
            self.assertEqual(read_text(target), "hi")

    def test_export_wraps_literal_crlf_and_bom_contents(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "bom.txt").write_bytes(b"\xef\xbb\xbfhi")
            (root / "win.txt").write_bytes(b"line1\r\nline2\r\n")
            tree = TreeNode(root.name, root, True, children=[
                TreeNode("bom.txt", root / "bom.txt", False, checked=True),
                TreeNode("win.txt", root / "win.txt", False, checked=True),
            ])

            result = build_export(tree, root)

            self.assertEqual(
                result.text,
                render_block(str(Path(root.name) / "bom.txt"), "hi")
                + render_block(str(Path(root.name) / "win.txt"), "line1\r\nline2\r\n"),
            )
            self.assertNotIn("\ufeff", result.text)


class BuildExportTests(unittest.TestCase):
    def test_no_checked_files_yields_empty_payload(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "a.txt").write_text("a", encoding="utf-8")
            tree = TreeNode(root.name, root, True, children=[TreeNode("a.txt", root / "a.txt", False)])

            result = build_export(tree, root)

            self.assertEqual(result.text, "")
            self.assertEqual(result.file_count, 0)
            self.assertEqual(result.feedback, FEEDBACK_NONE)

    def test_missing_tree_yields_empty_payload(self) -> None:
        result = build_export(None, None)
        self.assertEqual((result.text, result.file_count), ("", 0))

    def test_checked_files_are_exported_in_document_order(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "sub").mkdir()
            (root / "sub" / "b.txt").write_text("bee", encoding="utf-8")
            (root / "a.txt").write_text("ay", encoding="utf-8")
            tree = TreeNode(root.name, root, True, children=[
                TreeNode("sub", root / "sub", True, children=[TreeNode("b.txt", root / "sub" / "b.txt", False)]),
                TreeNode("a.txt", root / "a.txt", False),
            ])
            set_all(tree, True)

            result = build_export(tree, root)

            b_label = str(Path(root.name) / "sub" / "b.txt")
            a_label = str(Path(root.name) / "a.txt")
            self.assertEqual(result.text, render_block(b_label, "bee") + render_block(a_label, "ay"))
            self.assertEqual(result.file_count, 2)
            self.assertEqual(result.feedback, FEEDBACK_COPIED)

    def test_read_failure_emits_error_line_and_continues(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "bad.txt").write_text("x", encoding="utf-8")
            (root / "good.txt").write_text("ok", encoding="utf-8")
            tree = TreeNode(root.name, root, True, children=[
                TreeNode("bad.txt", root / "bad.txt", False, checked=True),
                TreeNode("good.txt", root / "good.txt", False, checked=True),
            ])

            def reader(path: Path) -> str:
                if path.name == "bad.txt":
                    raise PermissionError(13, "Permission denied")
                return read_text(path)

            result = build_export(tree, root, read=reader)

            self.assertTrue(result.text.startswith(f"Error reading {root / 'bad.txt'}: Permission denied\n"))
            self.assertIn(render_block(str(Path(root.name) / "good.txt"), "ok"), result.text)
            self.assertEqual(result.file_count, 1)
            self.assertEqual([error.path for error in result.errors], [root / "bad.txt"])

    def test_files_deleted_after_load_are_skipped(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            gone = root / "gone.txt"
            gone.write_text("bye", encoding="utf-8")
            tree = TreeNode(root.name, root, True, children=[TreeNode("gone.txt", gone, False, checked=True)])
            gone.unlink()

            result = build_export(tree, root)

            self.assertEqual((result.text, result.file_count, result.errors), ("", 0, ()))


if __name__ == "__main__":
    unittest.main()

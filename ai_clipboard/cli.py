"""Command-line front door for ai-clipboard.

Without a headless flag the Tk window is launched. ``--list`` prints the
filtered checkbox tree and ``--copy`` exports every file under the folder,
both without opening a window.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from . import __version__
from .clipboard import copy_text_to_clipboard
from .commands import copy_selected, open_folder, select_all
from .config import load_user_config
from .file_tree_model import TreeNode
from .log import configure_logging
from .state import AppState


def render_tree_lines(tree: TreeNode) -> list[str]:
    """Render ``tree`` as indented ``[x]``/``[ ]`` rows in document order."""
    lines: list[str] = []

    def walk(node: TreeNode, depth: int) -> None:
        mark = "[x]" if node.checked else "[ ]"
        suffix = "/" if node.is_dir else ""
        lines.append(f"{'  ' * depth}{mark} {node.name}{suffix}")
        for child in node.children:
            walk(child, depth + 1)

    walk(tree, 0)
    return lines


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ai-clipboard",
        description="Pick files from a folder tree and copy their contents to the clipboard.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Folder to open. Defaults to the last folder (GUI) or cwd.")
    parser.add_argument("--config", type=Path, default=None, help="Use this config file instead of the default.")
    parser.add_argument("--list", action="store_true", help="Print the filtered tree and exit.")
    parser.add_argument("--copy", action="store_true", help="Copy every file under PATH and exit.")
    parser.add_argument("--stdout", action="store_true", help="With --copy, print the payload instead of using the clipboard.")
    parser.add_argument(
        "--include-binaries",
        action="store_true",
        help="Keep files that look binary (headless modes only).",
    )
    parser.add_argument(
        "--ignore",
        action="append",
        default=None,
        metavar="PATTERN",
        help="Ignore pattern replacing the configured list; repeatable (headless modes only).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _write_stdout(text: str) -> bool:
    sys.stdout.write(text)
    return True


def launch_gui(path: Path | None, config_path: Path | None) -> None:
    """Import the Tk front end lazily so headless runs never load tkinter."""
    from .gui import run_app

    run_app(path, config_path=config_path)


def run_headless(args: argparse.Namespace, path: Path) -> None:
    config = load_user_config(args.config)
    if args.include_binaries:
        config.include_binaries = True
    if args.ignore:
        config.ignore_patterns = list(args.ignore)
    state = AppState(config=config)

    result = open_folder(state, path)
    if not result.changed:
        raise SystemExit(result.message)

    if args.list:
        sys.stdout.write("\n".join(render_tree_lines(state.tree)) + "\n")
        return

    select_all(state)
    writer = _write_stdout if args.stdout else copy_text_to_clipboard
    copied = copy_selected(state, writer)
    print(copied.message, file=sys.stderr)


def main(argv: list[str] | None = None, default_path: Path | None = None) -> None:
    """Parse CLI arguments and run headless or launch the window.

    ``default_path`` is primarily for tests; when omitted headless modes use
    the current working directory.
    """
    args = _build_parser().parse_args(argv)
    configure_logging(args.verbose)

    if args.stdout and not args.copy:
        raise SystemExit("--stdout requires --copy.")

    path = Path(args.path) if args.path is not None else None
    if path is not None and not path.exists():
        raise SystemExit(f"Path not found: {path}")

    if args.list or args.copy:
        if path is None:
            path = default_path if default_path is not None else Path.cwd()
        run_headless(args, path)
        return

    launch_gui(path, args.config)


if __name__ == "__main__":
    main()

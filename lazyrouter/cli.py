"""Command-line front door for lazyrouter.

Wires the full controller registry for a repository and prints views derived
from it: the keybinding cheatsheet per context and formatted branch rows.
"""

from __future__ import annotations

import argparse
import logging
import shutil
import sys
from pathlib import Path

from .ansi import align_columns, clip_ansi_line
from .commands import loaders
from .commands.git import GitCommand
from .config import load_user_config
from .gui import Gui
from .logs import configure_logging
from .presentation.branches import get_branch_list_display_strings
from .render.help import help_lines
from .ui_theme import UITheme, available_theme_names, resolve_theme

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _default_render_width() -> int:
    term = shutil.get_terminal_size((80, 24))
    return max(1, term.columns)


def render_keys(gui: Gui, theme: UITheme, context_key: str | None = None, max_cols: int | None = None) -> str:
    """Cheatsheet for one context, or for every context in tree order."""
    if context_key is not None:
        context = gui.contexts.by_key(context_key)
        if context is None:
            known = ", ".join(ctx.key for ctx in gui.contexts.all())
            raise SystemExit(f"Unknown context: {context_key} (known: {known})")
        contexts = [context]
    else:
        contexts = gui.contexts.all()

    blocks: list[str] = []
    for context in contexts:
        lines = help_lines(gui.registry, context, theme=theme, max_cols=max_cols)
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks) + "\n"


def render_branches(git: GitCommand, theme: UITheme, max_cols: int, show_remote_tracker: bool, full_description: bool) -> str:
    branches = loaders.load_branches(git)
    rows = get_branch_list_display_strings(branches, full_description, "", show_remote_tracker, theme)
    out: list[str] = []
    for line in align_columns(rows):
        out.append(clip_ansi_line(line, max_cols))
        out.append("\n")
    return "".join(out)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazyrouter",
        description="Inspect the keybinding routing and branch rows of a git repository.",
    )
    parser.add_argument("--path", default=None, help="Repository path. Defaults to current directory.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--log-file", default=None, help="Write logs to this file instead of the user log dir.")

    subparsers = parser.add_subparsers(dest="command", required=True)
    keys_parser = subparsers.add_parser("keys", help="Print the effective keybindings per context.")
    keys_parser.add_argument("--context", default=None, help="Only print bindings of this context key.")
    keys_parser.add_argument("--max-cols", type=_positive_int, default=None, help="Clip lines to this width.")

    branches_parser = subparsers.add_parser("branches", help="Print formatted local branch rows.")
    branches_parser.add_argument(
        "--max-cols",
        type=_positive_int,
        default=None,
        help="Column width for output (default: terminal width).",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and print the requested view.

    ``argv`` is primarily for tests; when omitted ``sys.argv`` is used.
    """
    args = build_parser().parse_args(argv)
    user_config = load_user_config()
    configure_logging(user_config.log_level, Path(args.log_file) if args.log_file else None)

    path = Path(args.path) if args.path else Path.cwd()
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    theme = resolve_theme(args.theme or user_config.theme, no_color=args.no_color)
    git = GitCommand(path.resolve())
    logger.debug("running %s in %s", args.command, git.repo_path)

    if args.command == "keys":
        gui = Gui(git, user_config=user_config)
        sys.stdout.write(render_keys(gui, theme, args.context, args.max_cols))
        return

    if git.try_run("rev-parse", "--git-dir") is None:
        raise SystemExit(f"Not a git repository: {path}")
    max_cols = args.max_cols if args.max_cols is not None else _default_render_width()
    sys.stdout.write(
        render_branches(
            git,
            theme,
            max_cols,
            user_config.show_remote_tracker,
            user_config.full_description,
        )
    )


if __name__ == "__main__":
    main()

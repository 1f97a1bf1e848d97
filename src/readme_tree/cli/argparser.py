"""Command-line argument parsing for readme-tree.

This module defines the command-line interface for readme-tree,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from readme_tree import __version__
from readme_tree.exclusion_rules.base_rules import BaseExclusionRules
from readme_tree.types import UNLIMITED_DEPTH, TreeFormat


def create_exclusion_action(exclusion_rules: BaseExclusionRules) -> Type[argparse.Action]:
    """Create a custom action class for handling exclusion rules.

    This factory function creates an action class that will update the provided
    exclusion rules object as arguments are processed, so patterns given with
    -i/--ignore and pattern files given with -e/--exclude keep their command-line order.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """

    class ExclusionRulesAction(argparse.Action):
        """Action to update exclusion rules as arguments are processed."""

        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return

            if option_string in ("-e", "--exclude"):
                exclusion_rules.load_rules(Path(str(values)))
            else:  # -i/--ignore
                exclusion_rules.add_rule(str(values))

            recorded = getattr(namespace, self.dest, None) or []
            setattr(namespace, self.dest, recorded + [values])

    return ExclusionRulesAction


def create_parser(exclusion_rules: BaseExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        An ArgumentParser instance configured with readme-tree's options.
    """
    description = """
    readme-tree: Render a directory's structure as text for READMEs and documentation.

    The tree is printed either as an ASCII box-drawing tree or as a nested Markdown
    bullet list. Directories are listed before files, each group sorted by name.

    Exclusion patterns are matched against entry names (not paths): a pattern excludes
    an entry with exactly that name, and a pattern ending in '*' excludes every entry
    whose name starts with the text before the '*'. By default node_modules, .git and
    .vscode are excluded; use --no-default-excludes to list them.
    """

    epilog = """
    Examples:
      # ASCII tree of the current directory
      readme-tree

      # Markdown bullet list of a project, two levels deep
      readme-tree -f markdown -d 2 /path/to/project

      # ASCII tree wrapped in a Markdown code block, saved as folder-structure.md
      readme-tree --fence -w /path/to/project

      # Only directories, excluding build output and anything starting with "tmp"
      readme-tree -D -i build -i "tmp*" /path/to/project

      # Patterns from a file, one per line
      readme-tree -e .treeignore /path/to/project

      # Reuse editor settings (readmeTreeGenerator.* keys)
      readme-tree -c .vscode/settings.json /path/to/project

      # Print directory and file counts to stderr
      readme-tree -s stderr /path/to/project
    """

    parser = argparse.ArgumentParser(
        prog="readme-tree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"readme-tree {__version__}", help="Show the version and exit"
    )

    ExclusionAction = create_exclusion_action(exclusion_rules)

    parser.add_argument(
        "directory",
        type=Path,
        nargs="?",
        default=Path("."),
        help="The directory to render (default: the current directory).",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=[f.value for f in TreeFormat],
        default=None,
        help="Output format (default: ascii, or markdown if the settings file sets useMarkdownFormat).",
    )
    parser.add_argument(
        "--fence",
        action="store_true",
        help="Wrap the ASCII tree in a Markdown code block.",
    )
    parser.add_argument(
        "-d",
        "--max-depth",
        type=int,
        metavar="N",
        default=None,
        help=f"Levels below the root to show. 0 shows the root only, {UNLIMITED_DEPTH} is unlimited.",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        type=str,
        metavar="PATTERN",
        action=ExclusionAction,
        help="Exclude entries named PATTERN, or starting with PATTERN's prefix if it ends in '*' (repeatable).",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        type=Path,
        metavar="FILE",
        action=ExclusionAction,
        help="Read exclusion patterns from FILE, one per line, '#' starts a comment (repeatable).",
    )
    parser.add_argument(
        "--no-default-excludes",
        action="store_true",
        help="Do not apply the default or settings-file exclusion patterns.",
    )
    parser.add_argument(
        "-D",
        "--dirs-only",
        action="store_true",
        help="List directories only.",
    )
    parser.add_argument(
        "-L",
        "--follow-symlinks",
        action="store_true",
        help=(
            "Descend into symbolic links to directories. There is no loop detection, "
            "so combine with -d/--max-depth when links may form cycles."
        ),
    )
    parser.add_argument(
        "-n",
        "--root-label",
        metavar="NAME",
        help="Name shown for the root (default: the directory's name).",
    )
    parser.add_argument(
        "-c",
        "--settings",
        type=Path,
        metavar="FILE",
        help="JSON settings file providing excludePatterns, maxDepth and useMarkdownFormat.",
    )

    output_group = parser.add_mutually_exclusive_group()
    output_group.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    output_group.add_argument(
        "-w",
        "--write",
        action="store_true",
        help="Write to folder-structure.txt (or .md for Markdown output) inside the rendered directory.",
    )

    parser.add_argument(
        "-s",
        "--summary",
        metavar="DEST",
        choices=["stderr", "stdout", "file"],
        help="Print summary report. Valid destinations: stderr, stdout, file (requires -o or -w)",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.max_depth is not None and args.max_depth < UNLIMITED_DEPTH:
        raise ValueError(f"-d/--max-depth must be {UNLIMITED_DEPTH} (unlimited) or a non-negative integer")

    if args.fence and args.format == TreeFormat.MARKDOWN.value:
        raise ValueError("--fence only applies to the ascii format")

    if args.summary == "file" and not (args.output or args.write):
        raise ValueError("--summary=file requires -o/--output or -w/--write to be specified")

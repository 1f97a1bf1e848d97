"""Command-line interface for readme-tree.

This module provides the command-line entry point, which folds the settings file,
built-in defaults and command-line flags into a single TraversalConfig, renders the
tree and writes it to stdout or a file.

Exit Codes:
    0: Successful completion
    1: Runtime error during execution (including unreadable settings)
    2: Command-line syntax error
    126: Permission denied while walking the tree or writing the output
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe on stdout

Example:
    # Basic usage
    $ readme-tree /path/to/project

    # Markdown list, directories only, two levels deep
    $ readme-tree -f markdown -D -d 2 /path/to/project
"""

import argparse
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Optional

from readme_tree.cli.argparser import create_parser, validate_args
from readme_tree.cli.output import silence_stdout, write_output
from readme_tree.config import TraversalConfig
from readme_tree.exceptions import TraversalError
from readme_tree.exclusion_rules.name_rules import NamePatternExclusionRules
from readme_tree.renderer import build_tree, get_strategy, wrap_in_code_fence
from readme_tree.settings import TreeSettings, default_output_name, load_settings
from readme_tree.types import TreeFormat


def format_counts(counts: Mapping[str, int]) -> str:
    """Format the counts into a human-readable string.

    Args:
        counts: Mapping with 'directories', 'files' and 'lines' entries.

    Returns:
        A formatted string showing all counts with appropriate labels.
    """
    return "\n".join(
        [
            f"Directories: {counts['directories']}",
            f"Files: {counts['files']}",
            f"Lines: {counts['lines']}",
        ]
    )


def build_config(
    args: argparse.Namespace, settings: TreeSettings, exclusion_rules: NamePatternExclusionRules
) -> TraversalConfig:
    """Merge settings and command-line arguments into a TraversalConfig.

    Command-line values win over settings values. Default exclusion patterns come
    first, followed by those given on the command line.
    """
    if args.format is not None:
        tree_format = TreeFormat(args.format)
    elif args.fence or not settings.use_markdown_format:
        tree_format = TreeFormat.ASCII
    else:
        tree_format = TreeFormat.MARKDOWN

    patterns = [] if args.no_default_excludes else list(settings.exclude_patterns)
    patterns.extend(exclusion_rules.patterns)

    return TraversalConfig(
        args.directory,
        root_label=args.root_label,
        exclude_patterns=patterns,
        max_depth=args.max_depth if args.max_depth is not None else settings.max_depth,
        include_files=not args.dirs_only,
        format=tree_format,
        follow_symlinks=args.follow_symlinks,
    )


def resolve_destination(args: argparse.Namespace, config: TraversalConfig, extension: str) -> Optional[Path]:
    """Return the file to write to, or None for stdout."""
    if args.output:
        return Path(args.output)
    if args.write:
        return Path(config.root_path) / default_output_name(extension)
    return None


def main() -> None:
    """Main entry point for the readme-tree command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        126: Permission denied
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe on stdout
    """
    try:
        # Populated by -i/-e while arguments are parsed
        exclusion_rules = NamePatternExclusionRules()
        parser = create_parser(exclusion_rules)
        args = parser.parse_args()

        validate_args(args)

        settings = load_settings(args.settings) if args.settings else TreeSettings()
        config = build_config(args, settings, exclusion_rules)

        tree = build_tree(config)
        strategy = get_strategy(config.format)
        text = tree.get_tree_representation(strategy)

        extension = strategy.get_file_extension()
        if args.fence:
            text = wrap_in_code_fence(text)
            extension = ".md"

        counts = {
            "directories": tree.get_directory_count(),
            "files": tree.get_file_count(),
            "lines": text.count("\n"),
        }
        if args.summary == "file":
            text += "\n" + format_counts(counts) + "\n"

        destination = resolve_destination(args, config, extension)
        write_output(text, destination)

        if args.summary == "stdout":
            write_output("\n" + format_counts(counts) + "\n")
        elif args.summary == "stderr":
            print(format_counts(counts), file=sys.stderr)

        if args.write and destination is not None:
            print(f"File '{destination.name}' created in {destination.parent}", file=sys.stderr)

    except TraversalError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(126 if isinstance(e.__cause__, PermissionError) else 1)
    except PermissionError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(126)
    except BrokenPipeError:
        silence_stdout()
        sys.exit(141)
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()

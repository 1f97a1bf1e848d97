"""Box-drawing tree output, in the style of the Unix ``tree`` command."""

from readme_tree.output_strategies.base_strategy import TreeFormatStrategy

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE_PREFIX = "│   "
SPACE_PREFIX = "    "


class AsciiTreeStrategy(TreeFormatStrategy):
    """Render entries with ``├──``/``└──`` connectors.

    The root line is the bare label. Every entry is drawn with a connector chosen by
    whether it is the last surviving sibling, and its children are indented by a
    vertical bar (more siblings follow) or by blanks (it was the last one).

    Example:
        >>> strategy = AsciiTreeStrategy()
        >>> strategy.format_root("proj/")
        'proj/'
        >>> strategy.format_entry("", "src/", False)
        '├── src/'
        >>> strategy.format_entry(strategy.child_prefix("", False), "a.ts", True)
        '│   └── a.ts'
    """

    @property
    def initial_prefix(self) -> str:
        return ""

    def format_root(self, display_name: str) -> str:
        return display_name

    def format_entry(self, prefix: str, display_name: str, is_last: bool) -> str:
        connector = LAST_BRANCH if is_last else BRANCH
        return f"{prefix}{connector}{display_name}"

    def child_prefix(self, prefix: str, is_last: bool) -> str:
        return prefix + (SPACE_PREFIX if is_last else PIPE_PREFIX)

    def get_file_extension(self) -> str:
        return ".txt"

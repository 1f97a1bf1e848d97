"""Nested Markdown bullet list output."""

from readme_tree.output_strategies.base_strategy import TreeFormatStrategy

BULLET = "- "
INDENT = "  "


class MarkdownTreeStrategy(TreeFormatStrategy):
    """Render entries as a Markdown list nested two spaces per level.

    Sibling position plays no part in this format: every entry gets the same bullet
    and every directory deepens the indent by the same amount.

    Example:
        >>> strategy = MarkdownTreeStrategy()
        >>> strategy.format_root("proj/")
        '- proj/'
        >>> strategy.format_entry(strategy.initial_prefix, "src/", False)
        '  - src/'
    """

    @property
    def initial_prefix(self) -> str:
        return INDENT

    def format_root(self, display_name: str) -> str:
        return BULLET + display_name

    def format_entry(self, prefix: str, display_name: str, is_last: bool) -> str:
        return f"{prefix}{BULLET}{display_name}"

    def child_prefix(self, prefix: str, is_last: bool) -> str:
        return prefix + INDENT

    def get_file_extension(self) -> str:
        return ".md"

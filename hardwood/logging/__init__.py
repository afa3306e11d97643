"""Run reports."""

from hardwood.logging.markdown_writer import MarkdownSeasonWriter

__all__ = ["MarkdownSeasonWriter"]

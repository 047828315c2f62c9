"""Whisker Template package — parsed templates ready for rendering."""

from whisker.template.core import Template
from whisker.template.result import RenderResult

__all__ = [
    "RenderResult",
    "Template",
]

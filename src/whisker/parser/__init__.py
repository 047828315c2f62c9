"""Whisker parser package.

Single forward scan over template text producing a ``Root`` component tree.
The scan is split across mixins:

- core: the scanning loop and error construction
- tags: tag content classification and set-delimiter parsing
- sections: section stack, raw body capture, balance check and freezing

"""

from __future__ import annotations

from whisker.parser.core import Parser, parse

__all__ = ["Parser", "parse"]

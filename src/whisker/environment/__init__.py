"""Whisker environment: configuration, errors and diagnostics."""

from whisker.environment.exceptions import (
    CallbackError,
    ErrorCode,
    InvalidDataError,
    InvalidSetDelimiterError,
    LambdaResultError,
    RecursionLimitError,
    SourceSnippet,
    SubTemplateError,
    TemplateError,
    TemplateRuntimeError,
    TemplateSyntaxError,
    UnclosedSectionError,
    UnclosedTagError,
    UnopenedSectionError,
    build_source_snippet,
)
from whisker.environment.core import DEFAULT_MAX_DEPTH, Environment, get_default_environment

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "CallbackError",
    "Environment",
    "ErrorCode",
    "InvalidDataError",
    "InvalidSetDelimiterError",
    "LambdaResultError",
    "RecursionLimitError",
    "SourceSnippet",
    "SubTemplateError",
    "TemplateError",
    "TemplateRuntimeError",
    "TemplateSyntaxError",
    "UnclosedSectionError",
    "UnclosedTagError",
    "UnopenedSectionError",
    "build_source_snippet",
    "get_default_environment",
]

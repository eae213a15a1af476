"""
Irene exception classes.

This package provides all exception types used throughout Irene for
consistent error handling and reporting.
"""

from irene.exceptions.core import (
    CommandRegistrationError,
    ConfigurationError,
    ErrorKind,
    ErrorLevel,
    ExhaustionError,
    InputTooLongError,
    IreneError,
    LexicalError,
    NestingDepthError,
    ParseError,
    StructuralError,
)

__all__ = [
    "IreneError",
    "ErrorKind",
    "ErrorLevel",
    "ParseError",
    "LexicalError",
    "StructuralError",
    "NestingDepthError",
    "ExhaustionError",
    "InputTooLongError",
    "CommandRegistrationError",
    "ConfigurationError",
]

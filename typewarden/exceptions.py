"""
Exceptions raised for programmer errors.

Ordinary validation failures are never raised; they are returned inside a
ValidationResult. These exceptions signal a malformed descriptor or a misuse
of the validate() call surface.
"""


class TypeWardenError(Exception):
    """Base class for typewarden exceptions."""


class DescriptorError(TypeWardenError, TypeError):
    """A descriptor or a validate() argument is not well formed."""

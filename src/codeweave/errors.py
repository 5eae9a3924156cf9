"""Exception classes for codeweave.

Provides standardized exceptions for tree construction and rendering.
All of them are programming errors in the calling generator: they abort
the current construction or render call and are never retried.
"""

from __future__ import annotations


class CodeweaveError(Exception):
    """Base exception for all codeweave errors.

    Subclass this for specific error categories.
    """

    pass


class InvalidIdentifierError(CodeweaveError, ValueError):
    """A name fails the identifier validity rule.

    Raised at construction time, so malformed trees cannot be built.
    """

    def __init__(self, name: str, kind: str = "identifier") -> None:
        """Initialize invalid identifier error.

        Args:
            name: The offending name
            kind: What the name was meant to be (e.g., "identifier", "import alias")
        """
        self.name = name
        self.kind = kind
        super().__init__(f"{name!r} is not a valid {kind}")


class AliasCollisionError(CodeweaveError):
    """An import alias is already bound within the same unit.

    Raised when an explicit alias is bound to a different path, or when a
    path that is already imported is requested under a different alias.
    """

    def __init__(self, alias: str, path: str, bound_to: str) -> None:
        """Initialize alias collision error.

        Args:
            alias: The requested alias
            path: The path being imported
            bound_to: Description of the existing binding
        """
        self.alias = alias
        self.path = path
        self.bound_to = bound_to
        super().__init__(f"cannot import {path!r} as {alias!r}: {bound_to}")


class UnsupportedConstructError(CodeweaveError):
    """A construct has no node, or a node was given unusable arguments.

    Raised by generators (type reflection, route maps) and by node
    constructors at construction time.
    """

    def __init__(self, construct: object, message: str = "is not supported") -> None:
        """Initialize unsupported construct error.

        Args:
            construct: The source structure that could not be mapped
            message: Description of the problem
        """
        self.construct = construct
        super().__init__(f"{construct!r} {message}")


class UnsupportedOperatorError(CodeweaveError):
    """A dialect has no spelling for an operator.

    Raised at render time when the dialect dispatch has no matching case.
    """

    def __init__(self, operator: object, dialect: str) -> None:
        """Initialize unsupported operator error.

        Args:
            operator: The operator that could not be rendered
            dialect: Name of the active dialect
        """
        self.operator = operator
        self.dialect = dialect
        super().__init__(f"operator {operator!r} is not supported by dialect {dialect!r}")


class UnknownDialectError(CodeweaveError, ValueError):
    """No dialect is registered under the requested name."""

    def __init__(self, name: str, available: list[str]) -> None:
        """Initialize unknown dialect error.

        Args:
            name: The requested dialect name
            available: Registered dialect names
        """
        self.name = name
        self.available = available
        super().__init__(
            f"Unknown SQL dialect: {name!r}. Available dialects: {', '.join(available)}."
        )


class RenderError(CodeweaveError):
    """Error during rendering.

    Raised when a renderer is handed an object that is not a node it knows.
    """

    pass

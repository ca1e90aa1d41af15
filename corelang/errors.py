from __future__ import annotations


class CoreError(Exception):
    """ Base class for all corelang errors"""
    pass


class UnboundIdentifier(CoreError):
    """ Raised when an identifier is not bound in any frame of the chain"""

    def __init__(self, name, message: str | None = None):
        super().__init__(message or f"Cannot lookup unbound identifier {name}")
        self.name = name


class InvalidSyntax(CoreError):
    """ Raised when an expression has no recognised shape, or a callee is not a procedure"""


class CoreArithmeticError(CoreError, ArithmeticError):
    """ Raised for non-numeric operands to an arithmetic operator or division by zero"""


class CoreRecursionError(CoreError):
    """ Raised when evaluation or desugaring exhausts the host stack"""

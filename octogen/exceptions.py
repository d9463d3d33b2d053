"""Exceptions raised by octogen.

Gaps in the OpenAPI document are not patched over: the generator stops with
a SpecDefectError naming the operation so the document can be fixed upstream.
"""

from __future__ import annotations


class OctogenError(Exception):
    """Base exception for all octogen errors."""

    def __init__(self, message: str, *args):
        self.message = message
        super().__init__(message, *args)


class ConfigError(OctogenError):
    """Invalid generator configuration."""


class SpecDefectError(OctogenError):
    """The OpenAPI document lacks something the generator relies on.

    Attributes:
        operation_id: The operation being synthesized.
        detail: What is missing.
    """

    def __init__(self, operation_id: str, detail: str):
        self.operation_id = operation_id
        self.detail = detail
        super().__init__(f"{operation_id}: {detail}")


class UnsupportedOperationError(OctogenError):
    """The endpoint uses a verb no client method can be named for."""

    def __init__(self, verb: str, operation_id: str):
        self.verb = verb
        self.operation_id = operation_id
        super().__init__(f"{operation_id}: unsupported HTTP verb {verb!r}")

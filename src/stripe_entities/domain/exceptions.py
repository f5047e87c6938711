"""Domain exceptions for stripe-entities.

Exception hierarchy:
    DomainException (base)
    └── CodecError (carries the dotted field path)
        ├── MissingRequiredFieldError
        ├── UnknownEnumValueError
        ├── TypeMismatchError
        └── MalformedPayloadError

Decoding is fail-fast: the first error aborts the whole decode and no
partial entity is returned. Errors raised inside a nested entity are
re-raised as the same type with the outer field name prefixed to ``path``.
"""

from __future__ import annotations

from typing import Any, Self


class DomainException(Exception):
    """Base exception for all domain-level errors.

    All domain exceptions inherit from this class to enable
    catching domain errors distinctly from infrastructure errors.
    """


class CodecError(DomainException):
    """Base class for errors raised while mapping entities to and from JSON.

    Attributes:
        path: Field names from the outermost entity down to the failing
            field, e.g. ``("shipping", "address", "city")``.
    """

    def __init__(self, path: tuple[str, ...] = ()) -> None:
        self.path = path
        super().__init__(self._message())

    @property
    def field(self) -> str | None:
        """Name of the failing field, innermost level."""
        return self.path[-1] if self.path else None

    @property
    def dotted_path(self) -> str:
        return ".".join(self.path) or "<root>"

    def with_parent(self, parent: str) -> Self:
        """Return a copy of this error nested one level deeper under ``parent``."""
        nested = type(self).__new__(type(self))
        nested.__dict__.update(self.__dict__)
        nested.path = (parent, *self.path)
        DomainException.__init__(nested, nested._message())
        return nested

    def _message(self) -> str:
        return f"Codec error at {self.dotted_path}"


class MissingRequiredFieldError(CodecError):
    """Raised when a required field has no value after default resolution."""

    def __init__(self, field: str, wire_key: str | None = None, *, path: tuple[str, ...] = ()) -> None:
        self.wire_key = wire_key if wire_key is not None else field
        super().__init__(path or (field,))

    def _message(self) -> str:
        return f"Missing required field {self.dotted_path} (wire key '{self.wire_key}')"


class UnknownEnumValueError(CodecError):
    """Raised when an enum wire value matches no member and no fallback applies.

    Fields configured with a fallback member do not raise this error unless
    strict enum decoding is enabled.
    """

    def __init__(
        self,
        field: str | None,
        wire_value: str,
        enum_type: type | None = None,
        *,
        path: tuple[str, ...] = (),
    ) -> None:
        self.wire_value = wire_value
        self.enum_type = enum_type
        super().__init__(path or ((field,) if field else ()))

    def _message(self) -> str:
        enum_name = self.enum_type.__name__ if self.enum_type is not None else "enum"
        return f"Unknown {enum_name} value {self.wire_value!r} at {self.dotted_path}"


class TypeMismatchError(CodecError):
    """Raised when a JSON value's runtime shape does not match the declared type.

    Example: a mapping was expected but a scalar was found.
    """

    def __init__(
        self,
        field: str | None,
        expected: str,
        actual: Any,
        *,
        path: tuple[str, ...] = (),
    ) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(path or ((field,) if field else ()))

    def _message(self) -> str:
        return (
            f"Expected {self.expected} at {self.dotted_path}, "
            f"got {type(self.actual).__name__} {self.actual!r}"
        )


class MalformedPayloadError(CodecError):
    """Raised when a raw payload cannot be parsed as JSON at all."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(())

    def with_parent(self, parent: str) -> MalformedPayloadError:
        return self

    def _message(self) -> str:
        return f"Malformed JSON payload: {self.reason}"

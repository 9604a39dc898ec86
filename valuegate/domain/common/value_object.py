"""
Base class for validated Value Objects.

A validated value object wraps a single raw value and guarantees that every
instance callers can observe satisfies the type's invariant. The invariant
lives in one place, the ``validate`` hook, and every construction entry point
goes through it:

- ``from_value(item)`` / ``cls(item)``: raise whatever the hook raises
- ``try_from(item)``: ``(True, instance)`` or ``(False, None)``, never raises
- ``create_result(item)``: ``Success(instance)`` or ``Failure(Error)``, never raises
- ``make_result(item)``: ``Success(item)`` or ``Failure(Error)``, never raises
- ``check_result(result)``: chain onto a previous Result
- ``check_success(item)``: ``Success(DONE)`` or ``Failure(Error)``

Example:
    class MeetingTitle(ValidatedValueObject[str]):
        def validate(self) -> None:
            if not self.value.strip():
                raise ValidationError("Meeting title cannot be empty")

    MeetingTitle.from_value("Weekly sync")
    ok, title = MeetingTitle.try_from("")  # (False, None)

Each concrete class registers a zero-argument construction function when it
is defined. By default this creates a blank instance without running
``__init__``; a class can supply its own with the ``factory`` class keyword.
Calling ``cls(item)`` goes through the same construction function, so a
factory must not call ``cls`` itself:

    class Money(ValidatedValueObject[Decimal], factory=lambda: object.__new__(Money)):
        ...

The registration happens once at class creation and is never mutated, so
concurrent construction needs no coordination.
"""

from collections.abc import Callable
from functools import partial
from operator import attrgetter
from typing import Any, ClassVar, Generic, Self, TypeVar, get_args, get_origin

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from .errors import Error
from .exceptions import ConstructionError
from .result import DONE, Done, Failure, Result, Success

V = TypeVar("V")


class ValidatedValueObject(Generic[V]):
    """
    Base class for single-value Value Objects with a validation gate.

    Validated value objects are:
    - Immutable (the value is assigned once, at construction)
    - Compared by value (same concrete type and equal wrapped values)
    - Self-validating (override ``validate`` and raise ValidationError)

    The default ``validate`` accepts every value.
    """

    __slots__ = ("_value",)

    _factory: ClassVar[Callable[[], Any]]

    def __init_subclass__(cls, factory: Callable[[], Any] | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if factory is None:
            factory = partial(object.__new__, cls)
        cls._factory = staticmethod(factory)

    def __new__(cls, value: V) -> Self:
        return cls._construct(value)

    def __init__(self, value: V) -> None:
        # __new__ already bound and validated the value
        pass

    @property
    def value(self) -> V:
        return self._value

    def validate(self) -> None:
        """Override in subclasses to enforce rules. Raise on an invalid ``self.value``."""

    def is_valid(self) -> bool:
        """Re-run the validation hook against this instance's own value."""
        try:
            self.validate()
        except Exception:
            return False
        return True

    def _bind(self, value: V) -> None:
        try:
            object.__getattribute__(self, "_value")
        except AttributeError:
            pass
        else:
            raise AttributeError(f"{type(self).__name__} is already initialized")
        object.__setattr__(self, "_value", value)
        self.validate()

    @classmethod
    def _blank(cls) -> Self:
        factory = cls.__dict__.get("_factory")
        if factory is None:
            raise ConstructionError(cls.__name__, "no construction function registered")
        instance = cls._factory()
        if type(instance) is not cls:
            raise ConstructionError(
                cls.__name__, f"construction function returned {type(instance).__name__}"
            )
        return instance

    @classmethod
    def _construct(cls, item: V) -> Self:
        instance = cls._blank()
        instance._bind(item)
        return instance

    @classmethod
    def _value_type(cls) -> Any:
        for klass in cls.__mro__:
            for base in getattr(klass, "__orig_bases__", ()):
                if get_origin(base) is ValidatedValueObject:
                    (value_type,) = get_args(base)
                    return Any if isinstance(value_type, TypeVar) else value_type
        return Any

    @classmethod
    def create_result(cls, item: V) -> Result[Self, Error]:
        """
        Create a value object without raising.

        Returns:
            ``Success(instance)`` when valid, ``Failure(Error)`` otherwise
        """
        try:
            instance = cls._construct(item)
        except Exception as exc:
            return Failure(Error.from_exception(exc))
        return Success(instance)

    @classmethod
    def from_value(cls, item: V) -> Self:
        """
        Create a value object, raising if the value is invalid.

        Args:
            item: Raw value to wrap

        Returns:
            Validated instance holding ``item``

        Raises:
            ValidationError: If the value violates the type's invariant
            ConstructionError: If the construction function is broken
        """
        return cls._construct(item)

    @classmethod
    def try_from(cls, item: V) -> tuple[bool, Self | None]:
        """
        Create a value object without raising.

        Returns:
            ``(True, instance)`` when valid, ``(False, None)`` otherwise
        """
        result = cls.create_result(item)
        return result.is_success, result.value_or(None)

    @classmethod
    def make_result(cls, item: V) -> Result[V, Error]:
        """
        Validate a raw value and return it wrapped in a Result.

        The success branch carries the raw value, not the value object.
        """
        return cls.create_result(item).map(attrgetter("value"))

    @classmethod
    def check_result(cls, result: Result[V, Error]) -> Result[V, Error]:
        """
        Validate the value of a previous Result.

        A Failure is passed through untouched. A Success is returned as is
        when its value is valid for this type, otherwise replaced by a Failure.
        """
        if result.is_failure:
            return result
        return cls.create_result(result.unwrap()).flat_map(lambda _: result)

    @classmethod
    def check_success(cls, item: V) -> Result[Done, Error]:
        """Validate a raw value and report only whether it is valid."""
        return cls.create_result(item).map(lambda _: DONE)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        value_schema = handler.generate_schema(cls._value_type())
        return core_schema.no_info_plain_validator_function(
            cls._validate_field,
            json_schema_input_schema=value_schema,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda item: item.value if isinstance(item, ValidatedValueObject) else item,
                return_schema=value_schema,
            ),
        )

    @classmethod
    def _validate_field(cls, item: Any) -> Self:
        if isinstance(item, cls):
            return item
        result = cls.create_result(item)
        if result.is_failure:
            raise ValueError(result.unwrap_error().description)
        return result.unwrap()

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return False
        return bool(self._value == other._value)  # type: ignore[attr-defined]

    def __ne__(self, other: object) -> bool:
        return not self == other

    def __hash__(self) -> int:
        return hash(self._value)

    def __reduce__(self) -> tuple[Callable[[V], Self], tuple[V]]:
        return (type(self).from_value, (self._value,))

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def to_primitive(self) -> V:
        """Convert to the raw wrapped value for serialization."""
        return self._value


def equals(a: ValidatedValueObject[Any] | None, b: ValidatedValueObject[Any] | None) -> bool:
    """
    Compare two optional value objects.

    Both absent compare equal, exactly one absent compares unequal,
    otherwise the wrapped values decide.
    """
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False
    return a == b


def value_hash(obj: ValidatedValueObject[Any]) -> int:
    """Hash of a value object; derived from the wrapped value only."""
    return hash(obj.value)

"""Runtime values rendered by Whisker templates.

A ``Data`` holds exactly one of:

    OBJECT   name -> Data mapping (last write wins)
    STRING   text
    LIST     ordered Data items
    TRUE     section marker
    FALSE    section marker
    PARTIAL  zero-argument callable returning template text
    LAMBDA   one-argument callable taking text, returning text
    INVALID  moved-from value (see ``take()``)

The variant is stored as a ``DataType`` tag next to a single payload slot,
so a value can never be a string and a list at the same time.

Plain Python values convert with ``Data.from_python``::

    >>> data = Data.from_python({"name": "World", "items": ["a", "b"]})
    >>> data.get("items").is_non_empty_list()
    True

Callables convert by arity: no positional argument means PARTIAL, one means
LAMBDA. Wrap in ``Partial``/``Lambda`` to force the variant.

"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from whisker.environment.exceptions import InvalidDataError, LambdaResultError

PartialFunc = Callable[[], str]
LambdaFunc = Callable[[str], Union[str, "Data"]]


class DataType(Enum):
    """Active variant of a Data value."""

    OBJECT = "object"
    STRING = "string"
    LIST = "list"
    TRUE = "true"
    FALSE = "false"
    PARTIAL = "partial"
    LAMBDA = "lambda"
    INVALID = "invalid"


@dataclass(frozen=True, slots=True)
class Partial:
    """Mark a callable as a partial for ``Data.from_python``."""

    func: PartialFunc


@dataclass(frozen=True, slots=True)
class Lambda:
    """Mark a callable as a lambda for ``Data.from_python``."""

    func: LambdaFunc


_NO_VALUE: Any = object()


class Data:
    """Tagged-union value forming the data tree a template renders against.

    Construction:
        >>> Data()                      # empty object
        >>> Data("text")                # string
        >>> Data(["a", Data("b")])      # list
        >>> Data({"name": "x"})         # object
        >>> Data("name", "x")           # object with a single key
        >>> Data(DataType.LIST)         # empty value of the given type

    Object and list values are built up in place:
        >>> person = Data()
        >>> person["name"] = "Ada"
        >>> people = Data.list() << person << Data({"name": "Grace"})

    """

    __slots__ = ("_type", "_value")

    def __init__(self, value: Any = _NO_VALUE, var: Any = _NO_VALUE):
        if value is _NO_VALUE:
            self._type, self._value = DataType.OBJECT, {}
        elif var is not _NO_VALUE:
            if not isinstance(value, str):
                raise TypeError(f"Data(name, value) expects a str name, got {type(value).__name__}")
            self._type, self._value = DataType.OBJECT, {value: Data.from_python(var)}
        elif isinstance(value, DataType):
            self._type, self._value = value, _empty_payload(value)
        else:
            converted = Data.from_python(value)
            self._type, self._value = converted._type, converted._value

    # ------------------------------------------------------------------
    # Alternate constructors
    # ------------------------------------------------------------------

    @classmethod
    def _make(cls, type_: DataType, payload: Any) -> Data:
        data = cls.__new__(cls)
        data._type = type_
        data._value = payload
        return data

    @classmethod
    def object(cls, mapping: Mapping[str, Any] | None = None) -> Data:
        data = cls._make(DataType.OBJECT, {})
        for key, value in (mapping or {}).items():
            data.set(str(key), Data.from_python(value))
        return data

    @classmethod
    def string(cls, text: str = "") -> Data:
        return cls._make(DataType.STRING, text)

    @classmethod
    def list(cls, items: Iterable[Any] = ()) -> Data:
        return cls._make(DataType.LIST, [Data.from_python(item) for item in items])

    @classmethod
    def true(cls) -> Data:
        return cls._make(DataType.TRUE, None)

    @classmethod
    def false(cls) -> Data:
        return cls._make(DataType.FALSE, None)

    @classmethod
    def partial(cls, func: PartialFunc) -> Data:
        return cls._make(DataType.PARTIAL, func)

    @classmethod
    def lambda_(cls, func: LambdaFunc) -> Data:
        return cls._make(DataType.LAMBDA, func)

    @classmethod
    def from_python(cls, value: Any) -> Data:
        """Convert a plain Python value into a Data tree.

        Mapping -> OBJECT, str -> STRING, bool -> TRUE/FALSE, None -> FALSE,
        int/float -> STRING, other iterables -> LIST, callables -> PARTIAL
        or LAMBDA by arity. Data values are returned unchanged.

        Raises:
            TypeError: If the value has no Data equivalent.
        """
        if isinstance(value, Data):
            return value
        if isinstance(value, bool):
            return cls.true() if value else cls.false()
        if value is None:
            return cls.false()
        if isinstance(value, str):
            return cls.string(value)
        if isinstance(value, (int, float)):
            return cls.string(str(value))
        if isinstance(value, Partial):
            return cls.partial(value.func)
        if isinstance(value, Lambda):
            return cls.lambda_(value.func)
        if isinstance(value, Mapping):
            return cls.object(value)
        if callable(value):
            return cls.lambda_(value) if _takes_argument(value) else cls.partial(value)
        if isinstance(value, Iterable):
            return cls.list(value)
        raise TypeError(f"Cannot convert {type(value).__name__} to Data")

    # ------------------------------------------------------------------
    # Type info
    # ------------------------------------------------------------------

    @property
    def type(self) -> DataType:
        return self._type

    def is_object(self) -> bool:
        return self._type is DataType.OBJECT

    def is_string(self) -> bool:
        return self._type is DataType.STRING

    def is_list(self) -> bool:
        return self._type is DataType.LIST

    def is_bool(self) -> bool:
        return self._type is DataType.TRUE or self._type is DataType.FALSE

    def is_true(self) -> bool:
        return self._type is DataType.TRUE

    def is_false(self) -> bool:
        return self._type is DataType.FALSE

    def is_partial(self) -> bool:
        return self._type is DataType.PARTIAL

    def is_lambda(self) -> bool:
        return self._type is DataType.LAMBDA

    def is_invalid(self) -> bool:
        return self._type is DataType.INVALID

    def is_empty_list(self) -> bool:
        return self._type is DataType.LIST and not self._value

    def is_non_empty_list(self) -> bool:
        return self._type is DataType.LIST and bool(self._value)

    # ------------------------------------------------------------------
    # Object data
    # ------------------------------------------------------------------

    def set(self, name: str, value: Any) -> None:
        """Store ``value`` under ``name``. Ignored unless this is an object."""
        self._check_valid()
        if self._type is DataType.OBJECT:
            self._value[name] = Data.from_python(value)

    def get(self, name: str) -> Data | None:
        """Child named ``name``, or None when missing or not an object."""
        self._check_valid()
        if self._type is not DataType.OBJECT:
            return None
        return self._value.get(name)

    def keys(self) -> list[str]:
        self._check_valid()
        if self._type is not DataType.OBJECT:
            return []
        return list(self._value)

    def __getitem__(self, name: str) -> Data:
        self._require(DataType.OBJECT)
        return self._value[name]

    def __setitem__(self, name: str, value: Any) -> None:
        self._require(DataType.OBJECT)
        self._value[name] = Data.from_python(value)

    # ------------------------------------------------------------------
    # List data
    # ------------------------------------------------------------------

    def append(self, value: Any) -> None:
        """Append ``value``. Ignored unless this is a list."""
        self._check_valid()
        if self._type is DataType.LIST:
            self._value.append(Data.from_python(value))

    def __lshift__(self, value: Any) -> Data:
        self.append(value)
        return self

    @property
    def items(self) -> list[Data]:
        self._require(DataType.LIST)
        return self._value

    # ------------------------------------------------------------------
    # String and callback data
    # ------------------------------------------------------------------

    @property
    def string_value(self) -> str:
        self._require(DataType.STRING)
        return self._value

    @property
    def partial_value(self) -> PartialFunc:
        self._require(DataType.PARTIAL)
        return self._value

    @property
    def lambda_value(self) -> LambdaFunc:
        self._require(DataType.LAMBDA)
        return self._value

    def call_partial(self) -> str:
        return self.partial_value()

    def call_lambda(self, text: str) -> Data:
        """Invoke the lambda and normalise its result to a string Data.

        Raises:
            LambdaResultError: If the callback returned anything but text.
        """
        result = self.lambda_value(text)
        if isinstance(result, str):
            return Data.string(result)
        if isinstance(result, Data) and result.is_string():
            return result
        raise LambdaResultError(result)

    # ------------------------------------------------------------------
    # Move
    # ------------------------------------------------------------------

    def take(self) -> Data:
        """Move the payload into a new Data, leaving this one INVALID."""
        self._check_valid()
        moved = Data._make(self._type, self._value)
        self._type, self._value = DataType.INVALID, None
        return moved

    # ------------------------------------------------------------------

    def _check_valid(self) -> None:
        if self._type is DataType.INVALID:
            raise InvalidDataError("Data value was moved from and can no longer be read")

    def _require(self, expected: DataType) -> None:
        self._check_valid()
        if self._type is not expected:
            raise TypeError(f"Data is {self._type.value}, not {expected.value}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Data):
            return NotImplemented
        return self._type is other._type and self._value == other._value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._type in (DataType.TRUE, DataType.FALSE, DataType.INVALID):
            return f"Data({self._type.name})"
        return f"Data({self._type.name}, {self._value!r})"


def _empty_payload(type_: DataType) -> Any:
    if type_ is DataType.OBJECT:
        return {}
    if type_ is DataType.LIST:
        return []
    if type_ is DataType.STRING:
        return ""
    return None


def _takes_argument(func: Callable[..., Any]) -> bool:
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError) as exc:
        raise TypeError(
            f"Cannot inspect {func!r}; wrap it in Partial(...) or Lambda(...)"
        ) from exc
    for param in signature.parameters.values():
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD, param.VAR_POSITIONAL):
            return True
    return False

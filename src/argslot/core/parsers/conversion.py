"""Typed conversion of raw option values."""

from decimal import Decimal, InvalidOperation
from typing import Callable, TypeVar

__all__ = ["SUPPORTED_KINDS", "convert_value", "default_for"]

T = TypeVar("T")


def _numeric(parse: Callable[[str], object], kind_name: str) -> Callable[[str], object]:
    """Wrap a numeric parser so Python's underscore digit grouping ('1_000') is refused."""

    def _convert(raw: str) -> object:
        if "_" in raw:
            raise ValueError(f"invalid literal for {kind_name}: {raw!r}")
        return parse(raw)

    return _convert


def _to_decimal(raw: str) -> Decimal:
    try:
        return Decimal(raw.strip())
    except InvalidOperation as e:
        raise ValueError(f"invalid literal for Decimal: {raw!r}") from e


# kind -> (converter, zero value)
_CONVERTERS: dict[type, tuple[Callable[[str], object], Callable[[], object]]] = {
    str: (str, str),
    int: (_numeric(int, "int"), int),
    float: (_numeric(float, "float"), float),
    Decimal: (_numeric(_to_decimal, "Decimal"), Decimal),
}

SUPPORTED_KINDS: tuple[type, ...] = tuple(_CONVERTERS)


def _lookup(kind: type):
    try:
        return _CONVERTERS[kind]
    except KeyError:
        supported = ", ".join(k.__name__ for k in SUPPORTED_KINDS)
        raise TypeError(f"Unsupported value kind '{kind.__name__}', expected one of: {supported}") from None


def convert_value(raw: str, kind: type[T]) -> T:
    """
    Convert a raw textual value to the requested kind.

    Numeric parsing does not depend on the process locale.

    Args:
        raw: The raw value stored in an option slot
        kind: One of str, int, float or Decimal

    Returns:
        The converted value

    Raises:
        ValueError: If the text is not a valid literal for the requested kind
        TypeError: If the kind is not supported
    """
    converter, _ = _lookup(kind)
    return converter(raw)  # type: ignore[return-value]


def default_for(kind: type[T]) -> T:
    """Return the zero value used when a lookup misses ('' for str, 0 for numbers)."""
    _, zero = _lookup(kind)
    return zero()  # type: ignore[return-value]

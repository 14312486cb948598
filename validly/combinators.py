from __future__ import annotations
from typing import Any, Callable, Dict, Sequence

from .errors import require
from .validation import Invalid, Valid, Validation

MIN_ARITY = 2
MAX_ARITY = 8


def _combine(vs: Sequence[Validation[Any]], f: Callable[..., Any], lift: Callable[[Any], Validation[Any]]) -> Validation[Any]:
    for k, v in enumerate(vs, 1):
        require(v, f"v{k} validation cannot be None")
    require(f, "mapper cannot be None")
    if all(v.is_valid() for v in vs):
        return lift(f(*[v.value for v in vs]))  # type: ignore[attr-defined]
    # every argument is inspected; valid ones contribute no errors
    return Invalid(tuple(e for v in vs for e in v.errors))  # type: ignore[attr-defined]


def _fixed(kind: str, n: int, lift: Callable[[Any], Validation[Any]]) -> Callable[..., Validation[Any]]:
    name = f"{kind}{n}"

    def combinator(*args: Any) -> Validation[Any]:
        if len(args) != n + 1:
            raise TypeError(f"{name}() takes {n} validations and a mapper ({len(args)} arguments given)")
        return _combine(args[:-1], args[-1], lift)

    combinator.__name__ = combinator.__qualname__ = name
    combinator.__doc__ = (
        f"Combine {n} independent validations with an {n}-argument mapper.\n\n"
        f"All valid: {'Valid(mapper(...))' if kind == 'map' else 'mapper(...) as returned'}. "
        f"Otherwise Invalid with every argument's errors in argument order."
    )
    return combinator


def _flat(result: Validation[Any]) -> Validation[Any]:
    return require(result, "flat mapper returned None")


_MAP: Dict[int, Callable[..., Validation[Any]]] = {n: _fixed("map", n, Valid) for n in range(MIN_ARITY, MAX_ARITY + 1)}
_FLAT_MAP: Dict[int, Callable[..., Validation[Any]]] = {n: _fixed("flat_map", n, _flat) for n in range(MIN_ARITY, MAX_ARITY + 1)}

map2, map3, map4, map5, map6, map7, map8 = (_MAP[n] for n in range(MIN_ARITY, MAX_ARITY + 1))
flat_map2, flat_map3, flat_map4, flat_map5, flat_map6, flat_map7, flat_map8 = (
    _FLAT_MAP[n] for n in range(MIN_ARITY, MAX_ARITY + 1)
)


def _dispatch(table: Dict[int, Callable[..., Validation[Any]]], kind: str, args: Sequence[Any]) -> Validation[Any]:
    n = len(args) - 1
    if n not in table:
        raise ValueError(f"{kind} supports {MIN_ARITY} to {MAX_ARITY} validations, got {max(n, 0)}")
    return table[n](*args)


def map_n(*args: Any) -> Validation[Any]:
    """Variadic front for ``map2``..``map8``: ``map_n(v1, ..., vn, mapper)``.

    ```python
    map_n(valid("ada"), valid(36), Person)   # Valid(Person("ada", 36))
    map_n(invalid("a"), valid(1), invalid("b"), f).messages()  # ["a", "b"]
    ```
    """
    return _dispatch(_MAP, "map_n", args)


def flat_map_n(*args: Any) -> Validation[Any]:
    """Like ``map_n`` but the mapper returns a Validation, used as the result."""
    return _dispatch(_FLAT_MAP, "flat_map_n", args)

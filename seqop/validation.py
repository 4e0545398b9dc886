"""
pre-flight shape checks for user-supplied functions.

every operation that takes a function checks it here before touching a single
element. arity is checked by binding placeholder arguments against the
function's signature; parameter and return types are checked only where the
function carries annotations and the expected type is known.
"""
from __future__ import annotations

import inspect
import logging
import types
import typing

from .errors import ContractViolation

logger = logging.getLogger(__name__)

# marks an annotation that is absent or cannot be compared
_UNKNOWN = object()

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


class _Shape:
    """the introspected shape of a callable: positional parameter annotations and return annotation"""

    def __init__(self, params: typing.List[typing.Any], returns: typing.Any):
        self.params = params
        self.returns = returns

    def param(self, index: int) -> typing.Any:
        return self.params[index] if index < len(self.params) else _UNKNOWN


def _signature(func) -> inspect.Signature:
    """signature of whatever actually runs: __init__ for classes, __call__ for instances"""
    try:
        return inspect.signature(func, eval_str=True)
    except (NameError, SyntaxError):
        # forward refs that don't resolve stay as strings
        return inspect.signature(func)


def _shape_of(func, arity: int, operation: str) -> typing.Optional[_Shape]:
    if not callable(func):
        raise ContractViolation(operation, f"expected a callable, got {type(func).__name__}")

    try:
        signature = _signature(func)
    except (TypeError, ValueError):
        logger.debug("cannot introspect %r for %s, skipping shape check", func, operation)
        return None

    try:
        signature.bind(*range(arity))
    except TypeError:
        raise ContractViolation(operation, f"function must be callable with {arity} positional argument(s)") from None

    positional = [p for p in signature.parameters.values() if p.kind in _POSITIONAL]
    params = [_annotation(p.annotation) for p in positional[:arity]]
    returns = _annotation(signature.return_annotation)
    if returns is _UNKNOWN and isinstance(func, type):
        # calling a class builds an instance of it
        returns = func
    return _Shape(params, returns)


def _annotation(hint: typing.Any) -> typing.Any:
    # missing annotations and strings that didn't resolve can't be compared
    if hint is inspect.Parameter.empty or isinstance(hint, str):
        return _UNKNOWN
    return hint


def _is_union(hint: typing.Any) -> bool:
    return typing.get_origin(hint) is typing.Union or isinstance(hint, types.UnionType)


def matches(hint: typing.Any, expected: typing.Optional[type]) -> bool:
    """true if an annotation is compatible with the expected exact type"""
    if hint is _UNKNOWN or expected is None or hint is typing.Any:
        return True
    if isinstance(hint, typing.TypeVar):
        return True
    if _is_union(hint):
        return any(matches(arm, expected) for arm in typing.get_args(hint))
    if hint is None:
        hint = type(None)
    origin = typing.get_origin(hint) or hint
    if not isinstance(origin, type):
        # Literal, Annotated, Callable and friends
        return True
    return origin is expected


def concrete_type(hint: typing.Any) -> typing.Optional[type]:
    """the class an annotation names, or none when it doesn't name exactly one"""
    if hint is _UNKNOWN or hint is typing.Any or _is_union(hint) or isinstance(hint, typing.TypeVar):
        return None
    if hint is None:
        return type(None)
    origin = typing.get_origin(hint) or hint
    return origin if isinstance(origin, type) else None


def _name(t: typing.Any) -> str:
    return getattr(t, '__name__', repr(t))


def _require(hint: typing.Any, expected: typing.Optional[type], operation: str, what: str) -> None:
    if not matches(hint, expected):
        raise ContractViolation(operation, f"{what} is {_name(hint)}, expected {_name(expected)}")


# --- checks, one per function shape ---

def check_unary(func, element_type: typing.Optional[type], operation: str) -> typing.Optional[type]:
    """T -> T2. returns T2 when the return annotation names a concrete class."""
    shape = _shape_of(func, 1, operation)
    if shape is None:
        return None
    _require(shape.param(0), element_type, operation, "argument type")
    return concrete_type(shape.returns)


def check_predicate(func, element_type: typing.Optional[type], operation: str) -> None:
    """T -> bool"""
    shape = _shape_of(func, 1, operation)
    if shape is None:
        return
    _require(shape.param(0), element_type, operation, "argument type")
    _require(shape.returns, bool, operation, "return type")


def check_key(func, element_type: typing.Optional[type], operation: str) -> None:
    """T -> K, where K must be usable as a dict key"""
    key_type = check_unary(func, element_type, operation)
    if key_type is not None and key_type.__hash__ is None:
        raise ContractViolation(operation, f"key type {key_type.__name__} is not hashable")


def check_fold(func, seed_type: type, element_type: typing.Optional[type], operation: str) -> None:
    """(T2, T) -> T2, where T2 is the seed's type"""
    shape = _shape_of(func, 2, operation)
    if shape is None:
        return
    _require(shape.param(0), seed_type, operation, "accumulator type")
    _require(shape.param(1), element_type, operation, "element argument type")
    _require(shape.returns, seed_type, operation, "return type")
    accumulator = concrete_type(shape.param(0))
    returns = concrete_type(shape.returns)
    if accumulator is not None and returns is not None and accumulator is not returns:
        raise ContractViolation(operation, "return type must match the accumulator type")


def check_less(func, element_type: typing.Optional[type], operation: str) -> None:
    """(T, T) -> bool"""
    shape = _shape_of(func, 2, operation)
    if shape is None:
        return
    left, right = concrete_type(shape.param(0)), concrete_type(shape.param(1))
    if left is not None and right is not None and left is not right:
        raise ContractViolation(operation, "both arguments must have the same type")
    _require(shape.param(0), element_type, operation, "first argument type")
    _require(shape.param(1), element_type, operation, "second argument type")
    _require(shape.returns, bool, operation, "return type")

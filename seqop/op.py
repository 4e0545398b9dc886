from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *
from .config import OpConfig, DEFAULT_CONFIG

# --- operations ---
from .extensions.core import _CoreOperations
from .extensions.grouping import _GroupingOperations
from .extensions.terminal import _TerminalOperations, TerminalAccessor
from .extensions.ordering import _OrderingOperations

# marks an element type that hasn't been inferred yet
_UNRESOLVED = object()

# --- abstract base class ---

class ISequence(ABC, Generic[T]):
    @abstractmethod
    def _get_data(self) -> List[T]:
        """get the underlying data as a list"""
        pass

# --- base implementation ---

class _BaseOp(ISequence[T]):
    def __init__(self, data: Iterable[T], element_type: Optional[type] = None,
                 config: Optional[OpConfig] = None):
        """wrap data; a list is owned as-is, anything else is copied into a new list"""
        self._data = data if isinstance(data, list) else list(data)
        self._element_type = element_type if element_type is not None else _UNRESOLVED
        self._config = config or DEFAULT_CONFIG

    def _get_data(self) -> List[T]:
        return self._data

    @property
    def data(self) -> List[T]:
        """the owned list"""
        return self._data

    @property
    def config(self) -> OpConfig:
        return self._config

    @property
    def element_type(self) -> Optional[type]:
        """
        the element type T, or none when it can't be determined.
        inferred once from the data when not given: every element must share one exact type.
        """
        if self._element_type is _UNRESOLVED:
            if not self._config.infer_element_type:
                return None
            found = {type(x) for x in self._data}
            if len(found) != 1:
                # empty data can still gain elements through the caller's list, so don't cache
                if not found:
                    return None
                self._element_type = None
            else:
                self._element_type = found.pop()
        return self._element_type

    def _element_type_hint(self) -> Optional[type]:
        """the element type if already known, without forcing inference"""
        return None if self._element_type is _UNRESOLVED else self._element_type

    def _check(self, checker: Callable, func: Callable, operation: str):
        """run a shape check against this operator's element type"""
        return checker(func, self.element_type, operation)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        type_name = getattr(self._element_type_hint(), '__name__', '?')
        return f"Op[{type_name}](len={len(self._data)})"

# --- main operator class ---

class Op(
    _BaseOp[T],
    _CoreOperations[T],
    _GroupingOperations[T],
    _TerminalOperations[T],
    _OrderingOperations[T]
):
    """wraps a homogeneous list and runs shape-checked higher-order operations over it."""
    def __init__(self, data: Iterable[T], element_type: Optional[type] = None,
                 config: Optional[OpConfig] = None):
        super().__init__(data, element_type, config)
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)

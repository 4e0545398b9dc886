from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *
from ..validation import check_predicate, check_fold

if typing.TYPE_CHECKING:
    from ..op import Op


class _TerminalOperations(Generic[T]):
    def any(self: 'Op[T]', predicate: Predicate[T]) -> bool:
        """true on the first element satisfying the predicate; false for an empty sequence"""
        self._check(check_predicate, predicate, 'any')
        for item in self._get_data():
            if predicate(item):
                return True
        return False

    def all(self: 'Op[T]', predicate: Predicate[T]) -> bool:
        """false on the first element failing the predicate; true for an empty sequence"""
        self._check(check_predicate, predicate, 'all')
        for item in self._get_data():
            if not predicate(item):
                return False
        return True

    def inject(self: 'Op[T]', seed: U, accumulator: Accumulator[U, T]) -> U:
        """strict left fold starting from seed"""
        check_fold(accumulator, type(seed), self.element_type, 'inject')
        result = seed
        for item in self._get_data():
            result = accumulator(result, item)
        return result


class TerminalAccessor(Generic[T]):
    def __init__(self, op_instance: 'Op[T]'):
        self._op = op_instance

    def list(self) -> List[T]:
        """the owned list itself"""
        return self._op._get_data()

    def tuple(self) -> Tuple[T, ...]:
        return tuple(self._op._get_data())

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._op._get_data())

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._op._get_data())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self._op._get_data())

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary; later keys overwrite earlier ones"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._op._get_data()}

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return len(self._op._get_data())
        self._op._check(check_predicate, predicate, 'count')
        return sum(1 for x in self._op._get_data() if predicate(x))

from __future__ import annotations
import typing
from ..types import *
from ..validation import check_unary, check_predicate

if typing.TYPE_CHECKING:
    from ..op import Op


class _CoreOperations(Generic[T]):
    def map(self: 'Op[T]', selector: Selector[T, U]) -> 'Op[U]':
        """project each element to a new form; result has the same length and order"""
        from ..op import Op
        result_type = self._check(check_unary, selector, 'map')
        return Op([selector(x) for x in self._get_data()], result_type, self._config)

    def select(self: 'Op[T]', predicate: Predicate[T]) -> 'Op[T]':
        """keep the elements satisfying a predicate, in their original order"""
        from ..op import Op
        self._check(check_predicate, predicate, 'select')
        return Op([x for x in self._get_data() if predicate(x)], self._element_type_hint(), self._config)

    def copy(self: 'Op[T]') -> 'Op[T]':
        """new operator over a fresh list holding the same elements"""
        from ..op import Op
        return Op(list(self._get_data()), self._element_type_hint(), self._config)

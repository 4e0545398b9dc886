from __future__ import annotations
import logging
import typing
import numpy as np
from ..types import *
from ..adapter import IndexAdapter, OrderAdapter
from .. import algorithms
from ..errors import ContractViolation
from ..validation import check_less

if typing.TYPE_CHECKING:
    from ..op import Op

logger = logging.getLogger(__name__)

RandomSource = Union[None, int, np.random.Generator, Draw]


def _resolve_draw(rng: RandomSource) -> Draw:
    """turn a random source into draw(n) -> uniform int in [0, n)"""
    if rng is None or (isinstance(rng, int) and not isinstance(rng, bool)):
        logger.debug("shuffle using numpy default_rng(seed=%r)", rng)
        rng = np.random.default_rng(rng)
    if isinstance(rng, np.random.Generator):
        return lambda n: int(rng.integers(n))
    if hasattr(rng, 'randrange'):
        # random.Random and anything shaped like it
        return rng.randrange
    if hasattr(rng, 'integers'):
        return lambda n: int(rng.integers(n))
    if callable(rng):
        return rng
    raise ContractViolation('shuffle', f"unsupported random source {type(rng).__name__}")


def _bounded(draw: Draw) -> Draw:
    def checked(n: int) -> int:
        j = draw(n)
        if not 0 <= j < n:
            raise ContractViolation('shuffle', f"random source returned {j}, outside [0, {n})")
        return j
    return checked


class _OrderingOperations(Generic[T]):
    def sort(self: 'Op[T]', less: Less[T]) -> 'Op[T]':
        """
        sorts in place with a strict "less-than" comparator and returns self.
        unstable: elements the comparator considers equal may end up in any order.
        """
        self._check(check_less, less, 'sort')
        algorithms.intro_sort(OrderAdapter(self._get_data(), less), self._config.insertion_cutoff)
        return self

    def stable_sort(self: 'Op[T]', less: Less[T]) -> 'Op[T]':
        """
        sorts in place with a strict "less-than" comparator and returns self.
        elements the comparator considers equal keep their relative order.
        """
        self._check(check_less, less, 'stable_sort')
        algorithms.stable_sort(OrderAdapter(self._get_data(), less), self._config.stable_block_size)
        return self

    def shuffle(self: 'Op[T]', rng: RandomSource = None) -> 'Op[T]':
        """
        fisher-yates shuffle in place, returns self.
        rng may be none, an int seed, a numpy generator, a random.Random or a callable draw(n).
        a source that draws out of range raises before any element moves.
        """
        draw = _bounded(_resolve_draw(rng))
        algorithms.fisher_yates(IndexAdapter(self._get_data()), draw)
        return self

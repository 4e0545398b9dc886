from __future__ import annotations
import typing
from collections import defaultdict
from ..types import *
from ..validation import check_key

if typing.TYPE_CHECKING:
    from ..op import Op


class _GroupingOperations(Generic[T]):
    def group_by(self: 'Op[T]', key_selector: KeySelector[T, K]) -> Dict[K, List[T]]:
        """
        bucket elements by key. keys keep first-seen order, each bucket keeps input order.
        """
        self._check(check_key, key_selector, 'group_by')
        groups = defaultdict(list)
        for item in self._get_data():
            groups[key_selector(item)].append(item)
        return dict(groups)

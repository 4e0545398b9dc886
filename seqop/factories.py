import typing
from .types import *
from .config import OpConfig

if typing.TYPE_CHECKING:
    from .op import Op

def from_iterable(data: Iterable[T], element_type: Optional[type] = None,
                  config: Optional[OpConfig] = None) -> 'Op[T]':
    """create operator over data; a list is wrapped without copying"""
    from .op import Op
    return Op(data, element_type, config)

def from_range(start: int, count: int) -> 'Op[int]':
    """create operator over count consecutive ints"""
    from .op import Op
    return Op(list(range(start, start + count)), int)

def repeat(item: T, count: int) -> 'Op[T]':
    """create operator with repeated item"""
    from .op import Op
    return Op([item] * count, type(item))

def empty(element_type: Optional[type] = None) -> 'Op[Any]':
    """create empty operator"""
    from .op import Op
    return Op([], element_type)

# --- aliases ---
seqop = from_iterable
S = from_iterable

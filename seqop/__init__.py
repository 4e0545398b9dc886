"""
'  ___  ___  __ _  ___  _ __
' / __|/ _ \/ _` |/ _ \| '_ \
' \__ \  __/ (_| | (_) | |_) |
' |___/\___|\__, |\___/| .__/
'              |_|     |_|
"""
import logging

# expose the main class
from .op import Op

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    repeat,
    empty,
    seqop,
    S
)

# expose supporting pieces
from .adapter import IndexAdapter, OrderAdapter
from .config import OpConfig, DEFAULT_CONFIG
from .errors import SeqOpError, ContractViolation

logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "Op",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "seqop",
    "S",
    "IndexAdapter",
    "OrderAdapter",
    "OpConfig",
    "DEFAULT_CONFIG",
    "SeqOpError",
    "ContractViolation"
]

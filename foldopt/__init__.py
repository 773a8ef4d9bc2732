from .fold import SupportsFold, fold
from .option import Option, Some, NONE, from_nullable
from .maybe import Maybe
from .combinators import (
    get_or_else,
    get_or_else_with,
    is_some,
    is_none,
    map_or,
    and_then,
    flat_map,
    or_else,
    or_,
    xor,
    flatten,
    contains,
    to_list,
    to_nullable,
)
from . import combinators
from .logger import ConsoleLogger

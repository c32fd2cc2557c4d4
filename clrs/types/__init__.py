from clrs.types.atom import Atom
from clrs.types.nil import Nil, NilType
from clrs.types.integer import Integer
from clrs.types.symbol import Symbol
from clrs.types.list_atom import List
from clrs.types.host_function import HostFunction
from clrs.types.environment import Environment
from clrs.types.closure import Closure

__all__ = [
    "Atom",
    "Nil",
    "NilType",
    "Integer",
    "Symbol",
    "List",
    "HostFunction",
    "Environment",
    "Closure",
]

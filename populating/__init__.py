'''Containers that populate themselves from a generator when constructed'''

__version__ = '0.1.0'

from .errors import InvalidArgumentError
from .generators import (
    DONE,
    Entry,
    EntryGenerator,
    EntryIterGenerator,
    FuncGenerator,
    Generator,
    IterGenerator,
    drain,
    entries_from,
    from_iterable,
)
from .data_structures import (
    PopulatingCollection,
    PopulatingList,
    PopulatingSet,
    PopulatingMapping,
    SubSequenceView,
    with_default,
)

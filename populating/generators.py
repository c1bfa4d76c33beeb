'''Producers consumed by the populating containers'''
import typing as tp

import attr

from .classutil import Sentinel

__all__ = [
    'DONE', 'Generator', 'EntryGenerator', 'Entry',
    'FuncGenerator', 'IterGenerator', 'EntryIterGenerator',
    'from_iterable', 'entries_from', 'drain',
]

T = tp.TypeVar('T')
T_co = tp.TypeVar('T_co', covariant=True)
KT = tp.TypeVar('KT')
VT = tp.TypeVar('VT')


class _Done(Sentinel):
    __slots__ = ()

    def __repr__(self):
        return 'DONE'

DONE = _Done()


class Generator(tp.Protocol[T_co]):
    '''Produces one item per call to produce(), then DONE'''

    def produce(self) -> tp.Union[T_co, _Done]:
        ...


@attr.s(slots=True, auto_attribs=True, frozen=True)
class Entry:
    '''Immutable key/value pair'''
    key   : tp.Any = attr.ib()
    value : tp.Any = attr.ib()

    def __iter__(self) -> tp.Iterator[tp.Any]:
        yield self.key
        yield self.value


class EntryGenerator(tp.Protocol):
    '''Produces one Entry per call to build_entry(), then DONE'''

    def build_entry(self) -> tp.Union[Entry, _Done]:
        ...


class FuncGenerator(tp.Generic[T]):
    '''Adapts a zero argument callable that already returns DONE when exhausted'''
    __slots__ = '_f',

    _f : tp.Callable[[], tp.Union[T, _Done]]

    def __init__(self, f : tp.Callable[[], tp.Union[T, _Done]]) -> None:
        self._f = f

    def produce(self) -> tp.Union[T, _Done]:
        return self._f()

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self._f!r})'


class IterGenerator(tp.Generic[T]):
    __slots__ = '_it',

    _it : tp.Iterator[T]

    def __init__(self, iterable : tp.Iterable[T]) -> None:
        self._it = iter(iterable)

    def produce(self) -> tp.Union[T, _Done]:
        return next(self._it, DONE)


class EntryIterGenerator(tp.Generic[KT, VT]):
    __slots__ = '_it',

    _it : tp.Iterator[tp.Tuple[KT, VT]]

    def __init__(self, pairs : tp.Iterable[tp.Tuple[KT, VT]]) -> None:
        self._it = iter(pairs)

    def build_entry(self) -> tp.Union[Entry, _Done]:
        try:
            key, value = next(self._it)
        except StopIteration:
            return DONE
        return Entry(key, value)


def from_iterable(iterable : tp.Iterable[T]) -> IterGenerator[T]:
    return IterGenerator(iterable)


def entries_from(source : tp.Union[tp.Mapping[KT, VT], tp.Iterable[tp.Tuple[KT, VT]]]) -> EntryIterGenerator[KT, VT]:
    '''
       Builds an EntryGenerator over a mapping (its items, in iteration
       order) or over an iterable of key/value pairs
    '''
    if isinstance(source, tp.Mapping):
        source = source.items()
    return EntryIterGenerator(source)


def drain(produce : tp.Callable[[], tp.Union[T, _Done]], consume : tp.Callable[[T], tp.Any]) -> int:
    '''
       Passes every item returned by produce() to consume() until produce()
       returns DONE. Returns the number of items consumed.

       produce() must eventually return DONE, otherwise this never returns.
    '''
    count = 0
    item = produce()
    while item is not DONE:
        consume(item)
        count += 1
        item = produce()
    return count

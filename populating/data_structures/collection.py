import typing as tp
import warnings
from collections.abc import MutableSequence, MutableSet

from .delegating import DelegatingMixin
from ..classutil import Sentinel
from ..errors import InvalidArgumentError
from ..generators import Generator, drain

__all__ = ['PopulatingCollection']

T = tp.TypeVar('T')


class _Missing(Sentinel):
    __slots__ = ()

_MISSING = _Missing()


class PopulatingCollection(DelegatingMixin, tp.Collection[T]):
    '''
       Collection that fills a backing container from a Generator when it is
       constructed, then forwards every operation to that container.

       generator.produce() is called until it returns DONE; each item is
       inserted into the container, in order, with a single call. The
       container is shared with the caller, not copied.

       Both arguments are checked before produce() is first called, so a
       rejected construction leaves the container untouched.
    '''
    __slots__ = '_obj', '_add', '__weakref__'

    _obj : tp.Collection[T]
    _add : tp.Callable[[T], tp.Any]

    # builds the container when none is passed; None means one is required
    _default_factory : tp.ClassVar[tp.Optional[tp.Callable[[], tp.Collection]]] = None

    _signature : tp.ClassVar[str] = 'generator, container'

    def __init__(self, generator : Generator[T], container : tp.Collection[T] = _MISSING) -> None:
        _check_producer(type(self), generator, 'generator', 'produce')
        if container is _MISSING:
            container = self._default_container()
        if container is None:
            raise InvalidArgumentError(type(self).__name__, self._signature,
                    'container must not be None')

        self._obj = container
        self._add = self._inserter(container)
        drain(generator.produce, self._add)

    @classmethod
    def _default_container(cls) -> tp.Collection:
        factory = cls._default_factory
        if factory is None:
            raise InvalidArgumentError(cls.__name__, cls._signature, 'container is required')
        return factory()

    @classmethod
    def _inserter(cls, container) -> tp.Callable[[T], tp.Any]:
        if isinstance(container, MutableSet):
            return container.add
        if isinstance(container, MutableSequence):
            return container.append

        for name in ('add', 'append'):
            insert = getattr(container, name, None)
            if callable(insert):
                warnings.warn(f'{type(container).__name__} is neither a MutableSet '
                              f'nor a MutableSequence, populating it through .{name}()')
                return insert

        raise InvalidArgumentError(cls.__name__, cls._signature,
                f'container {type(container).__name__} has no add() or append()')

    def __contains__(self, elem) -> bool:
        return self._obj.__contains__(elem)

    def __iter__(self) -> tp.Iterator[T]:
        return self._obj.__iter__()

    def __len__(self) -> int:
        return self._obj.__len__()

    def add(self, elem : T) -> None:
        self._add(elem)

    def remove(self, elem : T) -> None:
        self._obj.remove(elem)

    def update(self, elems : tp.Iterable[T]) -> None:
        for elem in elems:
            self._add(elem)

    def remove_all(self, elems : tp.Iterable[T]) -> bool:
        '''Removes every occurrence of each of elems; True if anything was removed'''
        elems = list(elems)
        doomed = [e for e in self._obj if e in elems]
        for e in doomed:
            self._obj.remove(e)
        return bool(doomed)

    def retain_all(self, elems : tp.Iterable[T]) -> bool:
        '''Removes everything not in elems; True if anything was removed'''
        elems = list(elems)
        doomed = [e for e in self._obj if e not in elems]
        for e in doomed:
            self._obj.remove(e)
        return bool(doomed)

    def contains_all(self, elems : tp.Iterable[T]) -> bool:
        return all(self._obj.__contains__(e) for e in elems)

    def clear(self) -> None:
        self._obj.clear()

    def to_list(self) -> tp.List[T]:
        return list(self._obj)


def _check_producer(cls : type, producer, name : str, method : str) -> None:
    if producer is None:
        raise InvalidArgumentError(cls.__name__, cls._signature, f'{name} must not be None')
    if not callable(getattr(producer, method, None)):
        raise InvalidArgumentError(cls.__name__, cls._signature,
                f'{name} {type(producer).__name__} has no {method}()')

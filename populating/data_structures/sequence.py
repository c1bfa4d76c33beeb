import itertools as it
import typing as tp

from .collection import PopulatingCollection, _MISSING
from .views import SubSequenceView
from ..errors import InvalidArgumentError
from ..generators import Generator

__all__ = ['PopulatingList']

T = tp.TypeVar('T')


class PopulatingList(PopulatingCollection[T], tp.MutableSequence[T]):
    '''
       PopulatingCollection over an ordered, index addressable container.

       Produced items are appended after whatever the container already
       holds. With no container a new list is used.
    '''
    __slots__ = ()

    _obj : tp.MutableSequence[T]

    _default_factory = list

    def __init__(self, generator : Generator[T], container : tp.MutableSequence[T] = _MISSING) -> None:
        super().__init__(generator, container)

    @classmethod
    def _inserter(cls, container) -> tp.Callable[[T], tp.Any]:
        try:
            return container.append
        except AttributeError:
            raise InvalidArgumentError(cls.__name__, cls._signature,
                    f'container {type(container).__name__} has no append()') from None

    @tp.overload
    def __getitem__(self, idx : int) -> T:
        ...

    @tp.overload
    def __getitem__(self, idx : slice) -> tp.MutableSequence[T]:
        ...

    def __getitem__(self, idx):
        return self._obj.__getitem__(idx)

    def __setitem__(self, idx, val) -> None:
        self._obj.__setitem__(idx, val)

    def __delitem__(self, idx) -> None:
        self._obj.__delitem__(idx)

    def __reversed__(self) -> tp.Iterator[T]:
        return self._obj.__reversed__()

    def insert(self, idx : int, elem : T) -> None:
        self._obj.insert(idx, elem)

    def append(self, elem : T) -> None:
        self._obj.append(elem)

    def extend(self, elems : tp.Iterable[T]) -> None:
        self._obj.extend(elems)

    def pop(self, idx : int = -1) -> T:
        return self._obj.pop(idx)

    def index(self, elem, *args) -> int:
        return self._obj.index(elem, *args)

    def count(self, elem) -> int:
        return self._obj.count(elem)

    def reverse(self) -> None:
        self._obj.reverse()

    def last_index(self, elem) -> int:
        for idx in range(len(self._obj) - 1, -1, -1):
            v = self._obj[idx]
            if v is elem or v == elem:
                return idx
        raise ValueError(f'{elem!r} is not in {self.__class__.__name__}')

    def iter_from(self, idx : int = 0) -> tp.Iterator[T]:
        '''Iterates from position idx to the end; 0 <= idx <= len(self)'''
        size = len(self._obj)
        if not 0 <= idx <= size:
            raise IndexError(f'position {idx} out of range for length {size}')
        return it.islice(self._obj, idx, None)

    def sublist(self, start : int, stop : int) -> SubSequenceView[T]:
        return SubSequenceView(self._obj, start, stop)

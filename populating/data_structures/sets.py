import typing as tp

from .collection import PopulatingCollection, _MISSING
from ..errors import InvalidArgumentError
from ..generators import Generator

__all__ = ['PopulatingSet']

T = tp.TypeVar('T')


class PopulatingSet(PopulatingCollection[T], tp.MutableSet[T]):
    '''
       PopulatingCollection over a container that enforces uniqueness.
       Duplicate items are handed to add() like any other. With no
       container a new set is used.
    '''
    __slots__ = ()

    _obj : tp.MutableSet[T]

    _default_factory = set

    def __init__(self, generator : Generator[T], container : tp.MutableSet[T] = _MISSING) -> None:
        super().__init__(generator, container)

    @classmethod
    def _inserter(cls, container) -> tp.Callable[[T], tp.Any]:
        try:
            return container.add
        except AttributeError:
            raise InvalidArgumentError(cls.__name__, cls._signature,
                    f'container {type(container).__name__} has no add()') from None

    @classmethod
    def _from_iterable(cls, it : tp.Iterable[T]) -> tp.Set[T]:
        return set(it)

    def discard(self, elem : T) -> None:
        self._obj.discard(elem)

    def pop(self) -> T:
        return self._obj.pop()

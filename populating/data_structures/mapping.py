import typing as tp
import warnings
from collections.abc import MutableMapping

from .collection import _MISSING, _check_producer
from .delegating import DelegatingMixin
from ..errors import InvalidArgumentError
from ..generators import EntryGenerator, drain

__all__ = ['PopulatingMapping']

KT = tp.TypeVar('KT')
VT = tp.TypeVar('VT')


class PopulatingMapping(DelegatingMixin, tp.MutableMapping[KT, VT]):
    '''
       Mapping that fills a backing mapping from an EntryGenerator when it
       is constructed, then forwards every operation to that mapping.

       entry_generator.build_entry() is called until it returns DONE. Each
       entry is stored with mapping[key] = value, so when a key is produced
       more than once the last value wins. With no mapping a new dict is
       used; the mapping is shared with the caller, not copied.
    '''
    __slots__ = '_obj', '__weakref__'

    _obj : tp.MutableMapping[KT, VT]

    _default_factory : tp.ClassVar[tp.Optional[tp.Callable[[], tp.MutableMapping]]] = dict

    _signature : tp.ClassVar[str] = 'entry_generator, mapping'

    def __init__(self, entry_generator : EntryGenerator, mapping : tp.MutableMapping[KT, VT] = _MISSING) -> None:
        _check_producer(type(self), entry_generator, 'entry_generator', 'build_entry')
        if mapping is _MISSING:
            mapping = self._default_container()
        if mapping is None:
            raise InvalidArgumentError(type(self).__name__, self._signature,
                    'mapping must not be None')
        self._check_mapping(mapping)

        self._obj = mapping

        def put(entry) -> None:
            key, value = entry
            mapping[key] = value

        drain(entry_generator.build_entry, put)

    @classmethod
    def _default_container(cls) -> tp.MutableMapping:
        factory = cls._default_factory
        if factory is None:
            raise InvalidArgumentError(cls.__name__, cls._signature, 'mapping is required')
        return factory()

    @classmethod
    def _check_mapping(cls, mapping) -> None:
        if isinstance(mapping, MutableMapping):
            return
        # index addressed containers take __setitem__ but not arbitrary keys
        if callable(getattr(mapping, '__setitem__', None)) and callable(getattr(mapping, 'keys', None)):
            warnings.warn(f'{type(mapping).__name__} is not a MutableMapping, '
                          f'populating it through __setitem__()')
            return
        raise InvalidArgumentError(cls.__name__, cls._signature,
                f'mapping {type(mapping).__name__} is not a MutableMapping')

    def __getitem__(self, key : KT) -> VT:
        return self._obj.__getitem__(key)

    def __setitem__(self, key : KT, val : VT) -> None:
        self._obj.__setitem__(key, val)

    def __delitem__(self, key : KT) -> None:
        self._obj.__delitem__(key)

    def __contains__(self, key) -> bool:
        return self._obj.__contains__(key)

    def __iter__(self) -> tp.Iterator[KT]:
        return self._obj.__iter__()

    def __len__(self) -> int:
        return self._obj.__len__()

    def keys(self) -> tp.KeysView[KT]:
        return self._obj.keys()

    def values(self) -> tp.ValuesView[VT]:
        return self._obj.values()

    def items(self) -> tp.ItemsView[KT, VT]:
        return self._obj.items()

    def get(self, key : KT, default=None):
        return self._obj.get(key, default)

    def pop(self, key : KT, *default):
        return self._obj.pop(key, *default)

    def popitem(self) -> tp.Tuple[KT, VT]:
        return self._obj.popitem()

    def setdefault(self, key : KT, default=None):
        return self._obj.setdefault(key, default)

    def update(self, *args, **kwargs) -> None:
        self._obj.update(*args, **kwargs)

    def clear(self) -> None:
        self._obj.clear()

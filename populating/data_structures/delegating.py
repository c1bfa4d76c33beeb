import typing as tp

__all__ = ['DelegatingMixin']


class DelegatingMixin:
    '''
       Equality, hashing and string forms taken from the backing container
       in _obj. Equality also requires both sides to be the same wrapper type.
    '''
    __slots__ = ()

    _obj : tp.Any

    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return self._obj == other._obj

    def __ne__(self, other) -> bool:
        eq = self.__eq__(other)
        if eq is NotImplemented:
            return eq
        return not eq

    def __hash__(self) -> int:
        return hash(self._obj)

    def __str__(self) -> str:
        return str(self._obj)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self._obj.__repr__()})'

import typing as tp

__all__ = ['SentinelMeta', 'Sentinel']


class SentinelMeta(type):
    '''
        SentinelMeta:
            metaclass for marker objects, one instance per class

        ------------------------------------

        class A(Sentinel):
            __slots__ = ()

        class B(Sentinel):
            __slots__ = ()

        assert A() is A()
        assert A() is not B()
        assert not A()
    '''

    __instances : tp.Dict[type, 'Sentinel'] = dict()

    def __call__(cls):
        try:
            return SentinelMeta.__instances[cls]
        except KeyError:
            obj = super().__call__()
            return SentinelMeta.__instances.setdefault(cls, obj)


class Sentinel(metaclass=SentinelMeta):
    __slots__ = ()

    def __hash__(self):
        return id(self)

    def __eq__(self, other):
        return self is other

    def __ne__(self, other):
        return self is not other

    def __bool__(self):
        return False

    def __repr__(self):
        return self.__class__.__name__

    def __reduce__(self):
        # unpickles to the existing instance
        return type(self), ()

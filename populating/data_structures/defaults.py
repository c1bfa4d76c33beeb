import typing as tp

__all__ = ['with_default']

W = tp.TypeVar('W', bound=type)

_DEFAULTED_TYPES : tp.Dict[tp.Tuple[type, tp.Callable[[], tp.Any]], type] = dict()

def with_default(wrapper : W, factory : tp.Callable[[], tp.Any]) -> W:
    '''
       Returns a subclass of wrapper that builds its backing container with
       factory() when none is passed to the constructor.

       with_default(PopulatingList, collections.deque)
       with_default(PopulatingMapping, collections.OrderedDict)

       Repeated calls with the same arguments return the same class. The
       cache is keyed on the factory object and holds it for the life of
       the process, so pass a named callable rather than a fresh lambda on
       each call. A weak key would not free anything, since the generated
       class itself refers to the factory.
    '''
    if not callable(factory):
        raise TypeError(f'default factory for {wrapper.__name__} must be callable, got {factory!r}')
    try:
        return _DEFAULTED_TYPES[wrapper, factory]
    except KeyError:
        return _make_defaulted(wrapper, factory)


def _make_defaulted(wrapper, factory):
    name = f'{wrapper.__name__}[{getattr(factory, "__name__", repr(factory))}]'
    namespace = {
        '__slots__' : (),
        '__module__' : wrapper.__module__,
        '_default_factory' : staticmethod(factory),
    }
    cls = type(name, (wrapper,), namespace)
    return _DEFAULTED_TYPES.setdefault((wrapper, factory), cls)

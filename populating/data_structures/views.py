'''Windows onto part of a backing sequence'''
import typing as tp

__all__ = ['SubSequenceView']

T = tp.TypeVar('T')


class SubSequenceView(tp.MutableSequence[T]):
    '''
       Live window over seq[start:stop]. Reads and writes go through to seq;
       index i of the view is seq[start + i].

       Inserting or deleting through the view grows or shrinks the window.
       Changing the length of seq by other means leaves the window bounds
       where they were.
    '''
    __slots__ = '_obj', '_start', '_stop'

    _obj   : tp.MutableSequence[T]
    _start : int
    _stop  : int

    def __init__(self, obj : tp.MutableSequence[T], start : int, stop : int) -> None:
        size = len(obj)
        if start < 0:
            raise IndexError(f'start index {start} < 0')
        if stop > size:
            raise IndexError(f'stop index {stop} > {size}')
        if start > stop:
            raise IndexError(f'start index {start} > stop index {stop}')
        self._obj = obj
        self._start = start
        self._stop = stop

    def _indices(self) -> range:
        return range(self._start, self._stop)

    @tp.overload
    def __getitem__(self, idx : int) -> T:
        ...

    @tp.overload
    def __getitem__(self, idx : slice) -> tp.List[T]:
        ...

    def __getitem__(self, idx):
        if isinstance(idx, slice):
            return [self._obj[i] for i in self._indices()[idx]]
        return self._obj[self._indices()[idx]]

    def __setitem__(self, idx, val) -> None:
        if not isinstance(idx, slice):
            self._obj[self._indices()[idx]] = val
            return

        span = self._indices()[idx]
        if span.step == 1:
            val = list(val)
            self._obj[span.start:span.stop] = val
            self._stop += len(val) - len(span)
            return

        val = list(val)
        if len(val) != len(span):
            raise ValueError(f'attempt to assign sequence of size {len(val)} '
                             f'to extended slice of size {len(span)}')
        for i, v in zip(span, val):
            self._obj[i] = v

    def __delitem__(self, idx) -> None:
        if not isinstance(idx, slice):
            del self._obj[self._indices()[idx]]
            self._stop -= 1
            return

        span = self._indices()[idx]
        for i in sorted(span, reverse=True):
            del self._obj[i]
        self._stop -= len(span)

    def insert(self, idx : int, val : T) -> None:
        # clamp like list.insert
        size = len(self)
        if idx < 0:
            idx = max(size + idx, 0)
        idx = min(idx, size)
        self._obj.insert(self._start + idx, val)
        self._stop += 1

    def __len__(self) -> int:
        return self._stop - self._start

    def __iter__(self) -> tp.Iterator[T]:
        for i in self._indices():
            yield self._obj[i]

    def __contains__(self, elem) -> bool:
        return any(e is elem or e == elem for e in self)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({list(self)!r})'

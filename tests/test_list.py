"""Tests for PopulatingList and its sub-range view."""

import collections
from collections.abc import MutableSequence
from unittest.mock import MagicMock

import pytest
from hypothesis import given, strategies as st

from populating import (
    InvalidArgumentError,
    PopulatingList,
    SubSequenceView,
    from_iterable,
)

from helpers import CountingGenerator


def test_list_built_from_generator(one_two_three):
    plist = PopulatingList(one_two_three)
    assert isinstance(plist, MutableSequence)
    assert list(plist) == ["one", "two", "three"]
    assert plist[0] == "one"
    assert plist[-1] == "three"


def test_list_with_existing_backing_list(four_five_six):
    backing = ["one", "two", "three"]
    plist = PopulatingList(four_five_six, backing)
    assert len(backing) == 6
    assert backing == ["one", "two", "three", "four", "five", "six"]
    assert plist.to_list() == backing


def test_empty_list_build_does_not_touch_backing(empty_generator):
    backing = MagicMock(spec=list)
    plist = PopulatingList(empty_generator, backing)
    assert backing.mock_calls == []
    assert len(plist) == 0


def test_list_rejects_absent_arguments():
    with pytest.raises(InvalidArgumentError):
        PopulatingList(None, [])
    generator = CountingGenerator(["x"])
    with pytest.raises(InvalidArgumentError):
        PopulatingList(generator, None)
    with pytest.raises(InvalidArgumentError):
        PopulatingList(None, None)
    with pytest.raises(InvalidArgumentError, match="no append"):
        PopulatingList(generator, {"x"})
    assert generator.calls == 0


def test_index_operations(one_two_three):
    backing = []
    plist = PopulatingList(one_two_three, backing)

    plist[1] = "TWO"
    plist.insert(0, "zero")
    plist.append("two")
    plist.extend(["one"])
    assert backing == ["zero", "one", "TWO", "three", "two", "one"]

    assert plist.index("one") == 1
    assert plist.index("one", 2) == 5
    assert plist.last_index("one") == 5
    assert plist.count("one") == 2
    assert plist[1:3] == ["one", "TWO"]

    assert plist.pop() == "one"
    assert plist.pop(0) == "zero"
    del plist[0]
    assert backing == ["TWO", "three", "two"]

    plist.reverse()
    assert backing == ["two", "three", "TWO"]
    assert list(reversed(plist)) == ["TWO", "three", "two"]

    plist += ["four"]
    assert backing == ["two", "three", "TWO", "four"]


def test_index_errors_pass_through(one_two_three):
    plist = PopulatingList(one_two_three)
    with pytest.raises(IndexError):
        plist[3]
    with pytest.raises(IndexError):
        plist[5] = "five"
    with pytest.raises(ValueError):
        plist.index("four")
    with pytest.raises(ValueError):
        plist.last_index("four")


def test_iter_from(one_two_three):
    plist = PopulatingList(one_two_three)
    assert list(plist.iter_from(1)) == ["two", "three"]
    assert list(plist.iter_from()) == ["one", "two", "three"]
    assert list(plist.iter_from(3)) == []


@pytest.mark.parametrize("position", [-1, 4, 10])
def test_iter_from_out_of_range(one_two_three, position):
    plist = PopulatingList(one_two_three)
    with pytest.raises(IndexError):
        plist.iter_from(position)


def test_sublist_reads_through(one_two_three):
    backing = []
    plist = PopulatingList(one_two_three, backing)
    view = plist.sublist(1, 3)

    assert isinstance(view, SubSequenceView)
    assert list(view) == ["two", "three"]
    assert len(view) == 2
    assert view[0] == "two"
    assert view[-1] == "three"
    assert view[:1] == ["two"]
    assert "three" in view and "one" not in view

    backing[2] = "THREE"
    assert view[1] == "THREE"

    with pytest.raises(IndexError):
        view[2]


@pytest.mark.parametrize("start, stop", [(-1, 2), (0, 4), (2, 1)])
def test_sublist_bounds(one_two_three, start, stop):
    plist = PopulatingList(one_two_three)
    with pytest.raises(IndexError):
        plist.sublist(start, stop)


def test_list_over_deque(one_two_three):
    backing = collections.deque()
    plist = PopulatingList(one_two_three, backing)
    assert list(backing) == ["one", "two", "three"]
    assert plist.last_index("two") == 1


def test_list_equality(one_two_three):
    a = PopulatingList(one_two_three)
    b = PopulatingList(from_iterable(["one", "two", "three"]))
    assert a == b
    assert a != PopulatingList(from_iterable(["one"]))
    assert a != ["one", "two", "three"]
    assert str(a) == "['one', 'two', 'three']"


@given(st.lists(st.text()), st.lists(st.text()))
def test_list_is_existing_content_then_produced_items(existing, produced):
    backing = list(existing)
    plist = PopulatingList(from_iterable(produced), backing)
    assert list(plist) == existing + produced


def test_sublist_writes_through(one_two_three):
    backing = []
    plist = PopulatingList(one_two_three, backing)
    view = plist.sublist(0, 2)

    view[0] = "ONE"
    assert backing == ["ONE", "two", "three"]

    view.append("one-and-a-half")
    assert backing == ["ONE", "two", "one-and-a-half", "three"]
    assert len(view) == 3

    view.insert(0, "zero")
    assert backing == ["zero", "ONE", "two", "one-and-a-half", "three"]
    assert list(view) == ["zero", "ONE", "two", "one-and-a-half"]

    del view[1]
    view.remove("two")
    assert backing == ["zero", "one-and-a-half", "three"]
    assert list(view) == ["zero", "one-and-a-half"]

    view.clear()
    assert backing == ["three"]
    assert len(view) == 0


def test_sublist_slice_assignment(one_two_three):
    backing = []
    plist = PopulatingList(one_two_three, backing)
    plist.extend(["four", "five"])
    view = plist.sublist(1, 4)

    view[0:2] = ["a", "b", "c"]
    assert backing == ["one", "a", "b", "c", "four", "five"]
    assert list(view) == ["a", "b", "c", "four"]

    view[::2] = ["x", "y"]
    assert backing == ["one", "x", "b", "y", "four", "five"]
    with pytest.raises(ValueError):
        view[::2] = ["only one"]

    del view[1:3]
    assert backing == ["one", "x", "four", "five"]
    assert list(view) == ["x", "four"]

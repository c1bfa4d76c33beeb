import pytest

from helpers import CountingEntryGenerator, CountingGenerator


@pytest.fixture
def one_two_three() -> CountingGenerator:
    return CountingGenerator(["one", "two", "three"])


@pytest.fixture
def four_five_six() -> CountingGenerator:
    return CountingGenerator(["four", "five", "six"])


@pytest.fixture
def empty_generator() -> CountingGenerator:
    return CountingGenerator([])


@pytest.fixture
def numbered_entries() -> CountingEntryGenerator:
    return CountingEntryGenerator([(1, "one"), (2, "two"), (3, "three")])

"""Tests for the non-empty sequence type."""

import pytest

from archivist.core.errors import EmptySequence
from archivist.core.nonempty import NonEmpty


def test_from_first_and_rest():
    seq = NonEmpty(1, 2, 3)
    assert len(seq) == 3
    assert list(seq) == [1, 2, 3]
    assert seq.first == 1
    assert seq.last == 3


def test_single_element():
    seq = NonEmpty("only")
    assert len(seq) == 1
    assert seq[0] == "only"


def test_from_iterable_rejects_empty():
    """Building from nothing fails."""
    with pytest.raises(EmptySequence):
        NonEmpty.from_iterable([])
    with pytest.raises(EmptySequence):
        NonEmpty.from_iterable(x for x in ())


def test_from_iterable_passes_through_nonempty():
    seq = NonEmpty("a")
    assert NonEmpty.from_iterable(seq) is seq


def test_sequence_behaviour():
    seq = NonEmpty.from_iterable("abc")
    assert "b" in seq
    assert seq.index("c") == 2
    assert seq[-1] == "c"
    assert seq[5:] == ()
    assert list(reversed(seq)) == ["c", "b", "a"]


def test_no_mutation():
    """There is no way to shrink the sequence."""
    seq = NonEmpty(1)
    assert not hasattr(seq, "append")
    assert not hasattr(seq, "pop")
    with pytest.raises(TypeError):
        del seq[0]


def test_equality_and_hash():
    assert NonEmpty(1, 2) == NonEmpty.from_iterable([1, 2])
    assert hash(NonEmpty(1, 2)) == hash(NonEmpty(1, 2))
    assert NonEmpty(1) != (1,)

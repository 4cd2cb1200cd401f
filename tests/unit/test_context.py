"""Tests for the recursion context."""

import io

import pytest

from value_exporter import NOT_FOUND, RecursionContext
from value_exporter.exceptions import UnsupportedKindError


class Thing:
    pass


@pytest.fixture
def context() -> RecursionContext:
    return RecursionContext()


class TestRecursionContextRejectsScalars:
    """Only sequences and records can be tracked."""

    @pytest.mark.parametrize(
        "value", [True, False, None, "string", b"bytes", 1, 1.5]
    )
    def test_add_fails(self, context, value):
        with pytest.raises(UnsupportedKindError):
            context.add(value)

    @pytest.mark.parametrize(
        "value", [True, False, None, "string", b"bytes", 1, 1.5]
    )
    def test_contains_fails(self, context, value):
        with pytest.raises(UnsupportedKindError):
            context.contains(value)

    def test_resource_fails(self, context):
        stream = io.BytesIO()
        with pytest.raises(UnsupportedKindError) as exc_info:
            context.add(stream)
        assert exc_info.value.kind == "resource"


class TestRecursionContextArrays:
    """Sequences are numbered in visitation order, matched by identity."""

    def test_first_array_gets_zero(self, context):
        assert context.add([]) == 0

    def test_indexes_follow_insertion_order(self, context):
        first, second, third = [1], [2], [3]
        assert context.add(first) == 0
        assert context.add(second) == 1
        assert context.add(third) == 2

    def test_add_is_idempotent(self, context):
        value = [1, 2, 3]
        assert context.add(value) == context.add(value) == 0
        assert len(context) == 1

    def test_equal_but_distinct_arrays_differ(self, context):
        a = [1, 2, 3]
        b = [1, 2, 3]
        assert context.add(a) == 0
        assert context.add(b) == 1
        assert context.contains(a) == 0
        assert context.contains(b) == 1

    def test_contains_unseen_array(self, context):
        context.add([1])
        assert context.contains([1]) is NOT_FOUND

    def test_array_found_after_mutation(self, context):
        value = {"a": 1}
        key = context.add(value)
        value["b"] = 2
        del value["a"]
        assert context.contains(value) == key

    def test_self_referencing_array(self, context):
        value = []
        value.append(value)
        assert context.add(value) == 0
        assert context.contains(value[0]) == 0

    def test_contains_does_not_register(self, context):
        value = [1]
        assert context.contains(value) is NOT_FOUND
        assert context.contains(value) is NOT_FOUND
        assert len(context) == 0


class TestRecursionContextObjects:
    """Records are identified by their object id."""

    def test_add_returns_object_id(self, context):
        obj = Thing()
        assert context.add(obj) == id(obj)

    def test_add_is_idempotent(self, context):
        obj = Thing()
        assert context.add(obj) == context.add(obj)
        assert len(context) == 1

    def test_distinct_objects_differ(self, context):
        a, b = Thing(), Thing()
        assert context.add(a) != context.add(b)

    def test_contains(self, context):
        obj = Thing()
        assert context.contains(obj) is NOT_FOUND
        token = context.add(obj)
        assert context.contains(obj) == token

    def test_token_is_stable_across_contexts(self, context):
        obj = Thing()
        other = RecursionContext()
        assert context.add(obj) == other.add(obj)


class TestNotFound:
    def test_is_falsy(self):
        assert not NOT_FOUND

    def test_is_distinct_from_first_index(self):
        assert NOT_FOUND != 0
        assert repr(NOT_FOUND) == "NOT_FOUND"

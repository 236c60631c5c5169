"""Tests for the null object."""

import copy
import pickle

from chirp import NULL, Base, NullObject, is_null


def test_null_object_is_shared():
    assert NullObject() is NULL
    assert NullObject() is NullObject()


def test_null_object_is_empty_and_falsy():
    assert not NULL
    assert len(NULL) == 0
    assert list(NULL) == []
    assert "anything" not in NULL
    assert str(NULL) == ""
    assert int(NULL) == 0
    assert float(NULL) == 0.0


def test_null_object_absorbs_access():
    assert NULL.user is NULL
    assert NULL.user.screen_name is NULL
    assert NULL["key"] is NULL
    assert NULL(1, two=2) is NULL
    assert NULL.anything().deeper is NULL


def test_null_object_equality_and_hash():
    assert NULL == None  # noqa: E711
    assert NULL == NullObject()
    assert NULL != 0
    assert NULL != ""
    assert hash(NULL) == hash(None)


def test_null_object_is_flagged():
    assert NULL.is_null is True
    assert Base.is_null is False
    assert is_null(NULL)
    assert is_null(None)
    assert not is_null(0)
    assert not is_null(Base({}))


def test_null_object_survives_copy_and_pickle():
    assert copy.copy(NULL) is NULL
    assert copy.deepcopy(NULL) is NULL
    assert pickle.loads(pickle.dumps(NULL)) is NULL


def test_dunder_lookups_are_not_absorbed():
    assert not hasattr(NULL, "__array__")
    assert repr(NULL) == "NullObject()"

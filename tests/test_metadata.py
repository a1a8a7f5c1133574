import dataclasses

import pytest

from fsmodel.metadata import FileMetadata, FileStat


def make(size=1000):
    return FileMetadata(size, None, "/dir", "foo.txt")


def test_new_metadata_future_size_equals_initial_size():
    meta = make(5000)
    assert meta.current_size == 5000
    assert meta.future_size == 5000
    assert meta.file_refcount == 0
    assert meta.evictable is True


def test_refcount_up_and_down():
    meta = make()
    meta.increase_file_refcount()
    meta.increase_file_refcount()
    assert meta.file_refcount == 2
    meta.decrease_file_refcount()
    assert meta.file_refcount == 1


def test_refcount_cannot_go_below_zero():
    meta = make()
    with pytest.raises(ValueError):
        meta.decrease_file_refcount()
    assert meta.file_refcount == 0


def test_write_start_raises_future_size_only():
    meta = make(1000)
    meta.notify_write_start(7, 3000)
    assert meta.future_size == 3000
    assert meta.current_size == 1000


def test_write_start_never_lowers_future_size():
    meta = make(1000)
    meta.notify_write_start(1, 3000)
    meta.notify_write_start(2, 2000)
    assert meta.future_size == 3000


def test_write_end_sets_current_size():
    meta = make(1000)
    meta.notify_write_start(1, 3000)
    meta.notify_write_end(1)
    assert meta.current_size == 3000
    with pytest.raises(KeyError):
        meta.notify_write_end(1)


def test_write_end_unknown_id():
    meta = make()
    with pytest.raises(KeyError):
        meta.notify_write_end(42)


def test_stat_reflects_state():
    meta = make(100000)
    meta.access_date = 12.5
    meta.modification_date = 2.5
    meta.increase_file_refcount()
    st = meta.stat()
    assert st == FileStat(
        size_in_bytes=100000,
        last_access_date=12.5,
        last_modification_date=2.5,
        refcount=1,
    )


def test_stat_is_a_snapshot():
    meta = make(100)
    st = meta.stat()
    meta.notify_write_start(1, 200)
    meta.notify_write_end(1)
    assert st.size_in_bytes == 100
    assert meta.stat().size_in_bytes == 200
    with pytest.raises(dataclasses.FrozenInstanceError):
        st.refcount = 3


def test_metadata_compares_by_identity():
    a = make(10)
    b = make(10)
    assert a == a
    assert not (a == b)
    assert len({a, b}) == 2
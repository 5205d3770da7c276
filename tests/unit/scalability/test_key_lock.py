"""KeyedLock: same key serialized, different keys independent, entries dropped after release."""

import threading

import pytest

from proposal_registry.scalability.key_lock import KeyedLock


def test_hold_marks_key_held_and_releases():
    lock = KeyedLock()
    with lock.hold(1):
        assert lock.is_held(1) is True
    assert lock.is_held(1) is False


def test_different_keys_do_not_block_each_other():
    lock = KeyedLock()
    with lock.hold(1):
        with lock.hold(2):
            assert lock.is_held(1)
            assert lock.is_held(2)


def test_lock_entry_exists_only_while_held():
    lock = KeyedLock()
    assert lock.key_count == 0
    assert lock.is_held(7) is False
    with lock.hold(7):
        assert lock.key_count == 1
    assert lock.key_count == 0


def test_lock_entry_dropped_when_block_raises():
    lock = KeyedLock()
    with pytest.raises(RuntimeError):
        with lock.hold("k"):
            raise RuntimeError("boom")
    assert lock.key_count == 0
    with lock.hold("k"):
        assert lock.is_held("k")


def test_many_distinct_keys_leave_no_entries():
    lock = KeyedLock()
    for key in range(1000):
        with lock.hold(key):
            pass
    assert lock.key_count == 0


def test_same_key_is_serialized():
    lock = KeyedLock()
    entered = threading.Event()
    release = threading.Event()
    order = []

    def first():
        with lock.hold("k"):
            order.append("first-in")
            entered.set()
            release.wait(timeout=5)
            order.append("first-out")

    def second():
        entered.wait(timeout=5)
        with lock.hold("k"):
            order.append("second-in")

    t1 = threading.Thread(target=first)
    t2 = threading.Thread(target=second)
    t1.start()
    t2.start()
    entered.wait(timeout=5)
    assert lock.is_held("k")
    release.set()
    t1.join(timeout=5)
    t2.join(timeout=5)
    assert order == ["first-in", "first-out", "second-in"]


def test_entry_kept_while_another_thread_waits():
    lock = KeyedLock()
    entered = threading.Event()
    release = threading.Event()

    def holder():
        with lock.hold("k"):
            entered.set()
            release.wait(timeout=5)

    def waiter():
        entered.wait(timeout=5)
        with lock.hold("k"):
            pass

    t1 = threading.Thread(target=holder)
    t2 = threading.Thread(target=waiter)
    t1.start()
    t2.start()
    entered.wait(timeout=5)
    assert lock.key_count == 1
    release.set()
    t1.join(timeout=5)
    t2.join(timeout=5)
    assert lock.key_count == 0

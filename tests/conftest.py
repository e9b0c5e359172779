import os
import sys
from typing import List

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from string_queue import StringQueue


def build_queue(values: List[str]) -> StringQueue:
    q = StringQueue()
    for value in values:
        q.insert_tail(value)
    return q


def assert_invariants(q: StringQueue) -> None:
    """head/tail/size が矛盾していないことを確認する"""
    if q.size() == 0:
        assert q._head is None
        assert q._tail is None
        return

    assert q._head is not None
    assert q._tail is not None
    assert q._tail.next is None

    seen = set()
    count = 0
    cur = q._head
    last = None
    while cur is not None:
        assert id(cur) not in seen, "cycle in chain"
        seen.add(id(cur))
        count += 1
        last = cur
        cur = cur.next
    assert count == q.size()
    assert last is q._tail


@pytest.fixture
def empty_queue():
    return StringQueue()


@pytest.fixture
def fruit_queue():
    return build_queue(["banana", "apple", "cherry"])

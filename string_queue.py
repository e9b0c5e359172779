from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple, Union

from queue_errors import AllocationError

logger = logging.getLogger(__name__)

WritableBuffer = Union[bytearray, memoryview]


@dataclass
class _Element:
    value: str
    next: Optional["_Element"] = None


class StringQueue:
    """
    単方向リンクで実装した文字列 Queue
    insert_head/insert_tail/remove_head/size: O(1)
    reverse: O(n)、sort: O(n log n)（安定なマージソート）

    ※ reverse/sort は既存の要素の next を付け替えるだけで、
      要素の生成・解放は行わない
    """

    def __init__(self) -> None:
        self._head: Optional[_Element] = None
        self._tail: Optional[_Element] = None
        self._size: int = 0

    # -------------------------
    # 挿入
    # -------------------------
    def _new_element(self, text: str) -> _Element:
        if not isinstance(text, str):
            raise TypeError(f"text must be str, not {type(text).__name__}")
        # remove_head で UTF-8 にするので、符号化できない値はここで弾く
        try:
            text.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise ValueError(f"text is not encodable as UTF-8: {exc.reason}") from exc
        try:
            return _Element(value=text)
        except MemoryError as exc:
            raise AllocationError("could not allocate queue element") from exc

    def insert_head(self, text: str) -> bool:
        # 要素を作り終えてからリンクするので、失敗時に Queue は変化しない
        node = self._new_element(text)
        node.next = self._head
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return True

    def insert_tail(self, text: str) -> bool:
        node = self._new_element(text)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return True

    # -------------------------
    # 削除
    # -------------------------
    def remove_head(self, buf: Optional[WritableBuffer] = None, bufsize: Optional[int] = None) -> bool:
        """
        先頭要素を取り除く。空なら False（buf には触れない）

        buf を渡すと値の UTF-8 バイト列を最大 bufsize - 1 バイトコピーし、
        直後に 0 を書き込む。切り詰めはエラーにしない
        """
        if self._head is None:
            return False

        if buf is not None:
            if bufsize is None:
                bufsize = len(buf)
            if bufsize < 1 or bufsize > len(buf):
                raise ValueError(f"bufsize must be in 1..{len(buf)}, got {bufsize}")
            data = self._head.value.encode("utf-8")
            n = min(len(data), bufsize - 1)
            buf[:n] = data[:n]
            buf[n] = 0

        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        node.next = None
        self._size -= 1
        return True

    def free(self) -> None:
        """
        すべての要素を解放して空にする（長いチェーンでも再帰しない）
        """
        released = self._size
        cur = self._head
        self._head = None
        self._tail = None
        self._size = 0
        while cur is not None:
            nxt = cur.next
            cur.next = None
            cur = nxt
        logger.debug("freed %d elements", released)

    # -------------------------
    # 参照
    # -------------------------
    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def peek(self) -> Optional[str]:
        return None if self._head is None else self._head.value

    def snapshot(self) -> List[str]:
        return list(self)

    def __iter__(self) -> Iterator[str]:
        cur = self._head
        while cur is not None:
            yield cur.value
            cur = cur.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"StringQueue({self.snapshot()!r})"

    # -------------------------
    # 並べ替え
    # -------------------------
    def reverse(self) -> None:
        if self._size < 2:
            return

        prev: Optional[_Element] = None
        cur = self._head
        while cur is not None:
            nxt = cur.next
            cur.next = prev
            prev = cur
            cur = nxt

        self._head, self._tail = prev, self._head
        self._tail.next = None
        logger.debug("reversed %d elements", self._size)

    def sort(self) -> None:
        if self._size < 2:
            return

        self._head = _merge_sort(self._head)
        # 再帰側では tail を追跡しないので、ここで末尾まで辿り直す
        tail = self._head
        while tail.next is not None:
            tail = tail.next
        self._tail = tail
        logger.debug("sorted %d elements", self._size)


# -------------------------
# マージソート（チェーンを受け取り、並べ替えたチェーンを返す）
# -------------------------
def _split(source: _Element) -> Tuple[_Element, Optional[_Element]]:
    """
    slow/fast で中央を探し、前半 ceil(n/2)・後半 floor(n/2) に分ける
    """
    slow = source
    fast = source.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next

    back = slow.next
    slow.next = None
    return source, back


def _merge(a: Optional[_Element], b: Optional[_Element]) -> Optional[_Element]:
    """
    ソート済みの 2 チェーンを 1 本にする。同値なら a 側を先に取る（安定）
    """
    if a is None:
        return b
    if b is None:
        return a

    if a.value <= b.value:
        head, a = a, a.next
    else:
        head, b = b, b.next

    last = head
    while a is not None and b is not None:
        if a.value <= b.value:
            last.next = a
            a = a.next
        else:
            last.next = b
            b = b.next
        last = last.next

    last.next = a if a is not None else b
    return head


def _merge_sort(head: Optional[_Element]) -> Optional[_Element]:
    if head is None or head.next is None:
        return head
    front, back = _split(head)
    return _merge(_merge_sort(front), _merge_sort(back))


# -------------------------
# 関数インターフェース（queue が None でもよい）
# -------------------------
def create() -> StringQueue:
    try:
        return StringQueue()
    except MemoryError as exc:
        raise AllocationError("could not allocate queue") from exc


def destroy(q: Optional[StringQueue]) -> None:
    if q is None:
        return
    q.free()


def insert_head(q: Optional[StringQueue], text: str) -> bool:
    if q is None:
        return False
    try:
        return q.insert_head(text)
    except AllocationError:
        logger.warning("insert_head failed: out of memory")
        return False


def insert_tail(q: Optional[StringQueue], text: str) -> bool:
    if q is None:
        return False
    try:
        return q.insert_tail(text)
    except AllocationError:
        logger.warning("insert_tail failed: out of memory")
        return False


def remove_head(
    q: Optional[StringQueue], buf: Optional[WritableBuffer] = None, bufsize: Optional[int] = None
) -> bool:
    if q is None:
        return False
    return q.remove_head(buf, bufsize)


def size(q: Optional[StringQueue]) -> int:
    return 0 if q is None else q.size()


def reverse(q: Optional[StringQueue]) -> None:
    if q is not None:
        q.reverse()


def sort(q: Optional[StringQueue]) -> None:
    if q is not None:
        q.sort()

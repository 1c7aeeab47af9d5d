# Fixed-size hash table (separate chaining) for string records.
# Each bucket is a permanent head Record; further records hang off head.next.
# A key is its own value; payloads are bounded to `payload_capacity` characters.

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from models import (
    EMPTY,
    PAYLOAD_CAPACITY,
    DeleteResult,
    InsertResult,
    Record,
    SearchHit,
)
from util import Debug, truncate_payload


class HashTableError(Exception):
    """Base class for table construction errors."""


class InvalidConfigurationError(HashTableError, ValueError):
    """Bucket count (or payload capacity) is not a positive integer."""


class AllocationError(HashTableError, MemoryError):
    """The bucket heads could not be allocated."""


def _check_positive(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidConfigurationError(f'{name} must be a positive integer, got {value!r}')


def hash_function(bucket_count: int, key: str) -> int:
    """Sum the code points of `key` and reduce modulo `bucket_count`."""
    _check_positive('bucket_count', bucket_count)
    return sum(ord(ch) for ch in key) % bucket_count


class ChainedHashTable:
    def __init__(self, bucket_count: int, debug: Optional[Debug] = None,
                 payload_capacity: int = PAYLOAD_CAPACITY):
        _check_positive('bucket_count', bucket_count)
        _check_positive('payload_capacity', payload_capacity)
        self._debug = debug if debug is not None else Debug(False)
        self._capacity = payload_capacity
        self._buckets: List[Record] = [Record() for _ in range(bucket_count)]
        self._size = 0

    def __len__(self):
        return self._size

    @property
    def debug(self) -> Debug:
        return self._debug

    @property
    def bucket_count(self) -> int:
        return len(self._buckets)

    @property
    def payload_capacity(self) -> int:
        return self._capacity

    def _index(self, key: str) -> int:
        self._debug('Inside hash_function()')
        return hash_function(len(self._buckets), key)

    def _normalize(self, key: str) -> str:
        return truncate_payload(key, self._capacity)

    def _new_record(self, payload: str) -> Record:
        return Record(payload)

    def insert(self, key: str) -> InsertResult:
        """Store `key` unless it's already in the table.

        The whole chain is checked for a duplicate first; an empty head is then
        reused in place, otherwise a new record is linked after the tail.
        """
        self._debug('Inside insert()')
        key = self._normalize(key)
        if key == EMPTY:
            return InsertResult.EMPTY_KEY

        i = self._index(key)
        self._debug('Hash index for [%s] is bucket [%d]', key, i)

        head = self._buckets[i]
        tail = head
        node = head
        while node is not None:
            if node.payload == key:
                self._debug('Data [%s] already in bucket [%d]', key, i)
                return InsertResult.ALREADY_EXISTS
            tail = node
            node = node.next

        if head.is_empty:
            head.payload = key
            self._debug('Reusing head of bucket [%d]', i)
        else:
            try:
                record = self._new_record(key)
            except MemoryError:
                self._debug('Failed to allocate a record for [%s]', key)
                return InsertResult.ALLOCATION_FAILURE
            tail.next = record
            self._debug('Linked [%s] after [%s] in bucket [%d]', key, tail.payload, i)

        self._size += 1
        return InsertResult.INSERTED

    def delete(self, key: str) -> DeleteResult:
        """Remove `key`.

        A head match is only cleared (heads are permanent and keep their chain);
        any other match is unlinked from its predecessor.
        """
        self._debug('Inside delete()')
        key = self._normalize(key)
        if key == EMPTY:
            return DeleteResult.NOT_FOUND

        i = self._index(key)
        prev: Optional[Record] = None
        node: Optional[Record] = self._buckets[i]
        while node is not None:
            self._debug('Comparing [%s] with [%s]', node.payload, key)
            if node.payload == key:
                self._debug('Found [%s] in bucket [%d]', key, i)
                if prev is None:
                    node.payload = EMPTY
                else:
                    prev.next = node.next
                    node.next = None
                self._size -= 1
                return DeleteResult.DELETED
            prev = node
            node = node.next

        return DeleteResult.NOT_FOUND

    def search(self, key: str) -> Optional[SearchHit]:
        self._debug('Inside search()')
        key = self._normalize(key)
        if key == EMPTY:
            return None

        i = self._index(key)
        position = 0
        node = self._buckets[i]
        while node is not None:
            if node.payload == key:
                self._debug('Data [%s] found in bucket [%d] in chain [%d]', key, i, position)
                return SearchHit(i, position)
            node = node.next
            position += 1
        return None

    def enumerate(self) -> Iterator[Tuple[int, str]]:
        """Yield (bucket index, payload) for every stored record.

        Buckets in index order, each chain head to tail; empty heads are skipped.
        """
        self._debug('Inside enumerate()')
        for i, head in enumerate(self._buckets):
            node = head
            while node is not None:
                if not node.is_empty:
                    yield i, node.payload
                elif node is head and node.next is not None:
                    self._debug('Bucket [%d] head is empty, chain continues', i)
                node = node.next

    def list_entries(self) -> List[Tuple[int, str]]:
        return list(self.enumerate())

    # Helper for debug / tests
    def chain(self, index: int) -> List[str]:
        """Payloads of one bucket, head first (an empty head shows as '')."""
        out = []
        node = self._buckets[index]
        while node is not None:
            out.append(node.payload)
            node = node.next
        return out

    def release(self) -> int:
        """Drop every non-head record and clear the heads.

        Returns the number of non-head records released.
        """
        self._debug('Inside release()')
        released = 0
        for head in self._buckets:
            node = head.next
            head.next = None
            head.payload = EMPTY
            while node is not None:
                nxt = node.next
                node.next = None
                node = nxt
                released += 1
        self._size = 0
        self._debug('Released [%d] chained records', released)
        return released


def build(bucket_count: int, debug: Optional[Debug] = None,
          payload_capacity: int = PAYLOAD_CAPACITY) -> ChainedHashTable:
    """Create a table with `bucket_count` empty heads.

    Raises InvalidConfigurationError for a bad count and AllocationError if the
    heads can't be allocated.
    """
    try:
        return ChainedHashTable(bucket_count, debug=debug, payload_capacity=payload_capacity)
    except MemoryError as exc:
        raise AllocationError(f'unable to allocate {bucket_count} buckets') from exc

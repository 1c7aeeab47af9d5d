"""models.py

Dataclasses and result codes shared by the hash table and the CLI:

- Record: one link in a bucket chain (the bucket head is a Record too).
- SearchHit: where a search found its key.
- InsertResult / DeleteResult: outcomes returned to the menu layer.
- RunOptions: options read from the command line.

These are intentionally simple structures so the chaining logic
lives in hash_table.py and the user-facing text lives in cli.py.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


# Buffers are BUFSIZ + 1 characters; one slot is kept for the terminator.
BUFFER_SIZE = 8193
PAYLOAD_CAPACITY = BUFFER_SIZE - 1

EMPTY = ''  # payload sentinel for "no data here"


@dataclass(eq=False)
class Record:
    """A record in a bucket chain.

    Identity matters (heads are reused in place), so records compare by identity.
    """

    payload: str = EMPTY
    next: Optional[Record] = None

    @property
    def is_empty(self) -> bool:
        return self.payload == EMPTY


@dataclass(frozen=True)
class SearchHit:
    """Location of a key: bucket index and 0-based position in the chain."""

    bucket: int
    position: int


class InsertResult(Enum):
    INSERTED = 'inserted'
    ALREADY_EXISTS = 'already_exists'
    ALLOCATION_FAILURE = 'allocation_failure'
    EMPTY_KEY = 'empty_key'        # the sentinel itself can't be stored


class DeleteResult(Enum):
    DELETED = 'deleted'
    NOT_FOUND = 'not_found'


@dataclass
class RunOptions:
    """Options passed from the shell."""

    bucket_count: int
    debug: bool = False

from dataclasses import dataclass
from typing import Iterator

from .key import Key


@dataclass(eq=False)
class Entry:
    key: Key | None
    next: "Entry | None"

    @classmethod
    def sentinel(cls) -> "Entry":
        return Entry(None, None)

    def is_sentinel(self) -> bool:
        return self.key is None


def new_entry(key: Key) -> Entry:
    return Entry(key=key, next=None)


def chain_tail(head: Entry) -> Entry:
    entry = head
    while entry.next is not None:
        entry = entry.next
    return entry


def append_entry(head: Entry, entry: Entry):
    chain_tail(head).next = entry


def iter_chain(head: Entry) -> Iterator[Entry]:
    entry = head.next
    while entry is not None:
        yield entry
        entry = entry.next


def unlink_first(head: Entry, key: Key) -> Entry | None:
    # returns the unlinked entry, None on a miss
    previous = head
    current = head.next
    while current is not None:
        if current.key == key:
            previous.next = current.next
            current.next = None
            return current
        previous = current
        current = current.next
    return None

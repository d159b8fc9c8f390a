from dataclasses import dataclass, field

from .entry import Entry, append_entry, iter_chain, new_entry, unlink_first
from .key import Key, as_key
from .shared import printf_err, sprintf


DEFAULT_EXPAND_THRESHOLD = 1.25
DEFAULT_SHRINK_THRESHOLD = 0.5
DEFAULT_INITIAL_CAPACITY = 1


_debug_trace_resize = False


def set_debug_trace_resize(b: bool):
    global _debug_trace_resize
    _debug_trace_resize = b


@dataclass(frozen=True)
class TableConfig:
    expand_threshold: float = DEFAULT_EXPAND_THRESHOLD
    shrink_threshold: float = DEFAULT_SHRINK_THRESHOLD
    initial_capacity: int = DEFAULT_INITIAL_CAPACITY

    def __post_init__(self) -> None:
        if not is_power_of_two(self.initial_capacity):
            raise ValueError(
                "initial_capacity must be a power of two", self.initial_capacity
            )
        if self.expand_threshold <= 0 or self.shrink_threshold <= 0:
            raise ValueError(
                "thresholds must be positive",
                self.expand_threshold,
                self.shrink_threshold,
            )
        if 2 * self.shrink_threshold > self.expand_threshold:
            raise ValueError(
                "shrink_threshold must be at most half of expand_threshold",
                self.expand_threshold,
                self.shrink_threshold,
            )


@dataclass(frozen=True)
class NotFound:
    pass


BucketMap = dict[int, Entry]


@dataclass
class ChainTable:
    """Separate chaining hash table over string keys, duplicates allowed."""

    config: TableConfig = field(default_factory=TableConfig)
    capacity: int = field(init=False)
    count: int = field(init=False)
    buckets: BucketMap = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.free()

    @property
    def expand_threshold(self) -> float:
        return self.config.expand_threshold

    @property
    def shrink_threshold(self) -> float:
        return self.config.shrink_threshold

    def insert(self, key: str | Key):
        key = as_key(key)
        insert_bucket(self.buckets, self.bucket_index(key), new_entry(key))
        self.count += 1
        self._expand_if_needed()

    def delete(self, key: str | Key) -> bool:
        key = as_key(key)
        head = self.buckets.get(self.bucket_index(key))
        if head is None:
            return False

        if unlink_first(head, key) is None:
            return False

        self.count -= 1
        self._shrink_if_needed()
        return True

    def search(self, key: str | Key) -> Entry | NotFound:
        key = as_key(key)
        head = self.buckets.get(self.bucket_index(key))
        if head is None:
            return NotFound()

        for entry in iter_chain(head):
            if entry.key == key:
                return entry
        return NotFound()

    def bucket_index(self, key: Key) -> int:
        return key.hash % self.capacity

    def load_factor(self) -> float:
        return self.count / self.capacity

    def free(self):
        self.capacity = self.config.initial_capacity
        self.count = 0
        self.buckets = {}

    def to_display_string(self) -> str:
        lines = []
        for index in sorted(self.buckets):
            keys = [str(entry.key) for entry in iter_chain(self.buckets[index])]
            if keys:
                lines.append(sprintf("{0:d}: {1:s}", index, " ".join(keys)))
        return "\n".join(lines)

    def _expand_if_needed(self):
        if self.load_factor() <= self.expand_threshold:
            return

        capacity = self.capacity
        while self.count / capacity > self.expand_threshold:
            capacity *= 2
        self._resize(capacity)

    def _shrink_if_needed(self):
        if self.load_factor() >= self.shrink_threshold or self.capacity == 1:
            return

        capacity = self.capacity
        while capacity > 1 and self.count / capacity < self.shrink_threshold:
            capacity //= 2
        self._resize(capacity)

    def _resize(self, capacity: int):
        if _debug_trace_resize:
            printf_err(
                "resize {0:d} -> {1:d} (count {2:d})\n",
                self.capacity,
                capacity,
                self.count,
            )

        self.buckets = rehash(self.buckets, capacity)
        self.capacity = capacity

    def __len__(self) -> int:
        return self.count

    def __contains__(self, key: str | Key) -> bool:
        return not isinstance(self.search(key), NotFound)

    def __str__(self) -> str:
        return self.to_display_string()


def insert_bucket(buckets: BucketMap, index: int, entry: Entry):
    if index not in buckets:
        buckets[index] = Entry.sentinel()
    append_entry(buckets[index], entry)


def rehash(buckets: BucketMap, capacity: int) -> BucketMap:
    new_buckets: BucketMap = {}
    for head in buckets.values():
        for entry in iter_chain(head):
            assert entry.key is not None
            index = entry.key.hash % capacity
            insert_bucket(new_buckets, index, new_entry(entry.key))
    return new_buckets


def is_power_of_two(n: int) -> bool:
    return n >= 1 and n & (n - 1) == 0

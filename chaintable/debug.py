from .entry import iter_chain
from .shared import printf
from .table import ChainTable


def print_table(table: ChainTable, name: str):
    printf(
        "== {0:s} (count {1:d}, capacity {2:d}, load {3:.2f}) ==\n",
        name,
        table.count,
        table.capacity,
        table.load_factor(),
    )

    dump = table.to_display_string()
    if dump:
        printf("{0:s}\n", dump)


def chain_lengths(table: ChainTable) -> dict[int, int]:
    lengths: dict[int, int] = {}
    for index, head in table.buckets.items():
        length = sum(1 for _ in iter_chain(head))
        if length > 0:
            lengths[index] = length
    return lengths


def longest_chain(table: ChainTable) -> int:
    return max(chain_lengths(table).values(), default=0)

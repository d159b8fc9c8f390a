import sys

from .debug import print_table
from .shared import printf, printf_err
from .table import ChainTable, NotFound, set_debug_trace_resize


USAGE = "Usage: chaintable [-t] [-i | [--] key ...]\n"

DEMO_KEYS = ("1", "2", "3", "4", "5")


def demo(table: ChainTable):
    for key in DEMO_KEYS:
        table.insert(key)
    print_table(table, "insert 1..5")

    table.delete("3")
    print_table(table, "delete 3")


def execute(table: ChainTable, line: str) -> bool:
    # False ends the session
    words = line.split()
    if not words:
        return True

    match words:
        case ["insert", key]:
            table.insert(key)
        case ["delete", key]:
            if not table.delete(key):
                printf("{0:s} not found\n", key)
        case ["search", key]:
            result = table.search(key)
            if isinstance(result, NotFound):
                printf("{0:s} not found\n", key)
            else:
                printf("{0:s} in bucket {1:d}\n", key, table.bucket_index(result.key))
        case ["dump"]:
            print_table(table, "table")
        case ["quit"] | ["exit"]:
            return False
        case _:
            printf_err("Unknown command '{0:s}'\n", line.strip())
    return True


def repl(table: ChainTable):
    while True:
        try:
            line = input("> ")
        except EOFError:
            printf("\n")
            break
        if not execute(table, line):
            break


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv

    interactive = False
    while args and args[0].startswith("-"):
        option, args = args[0], args[1:]
        if option == "--":
            break
        elif option == "-t":
            set_debug_trace_resize(True)
        elif option == "-i":
            interactive = True
        else:
            printf(USAGE)
            return 64

    table = ChainTable()
    if interactive:
        if args:
            printf(USAGE)
            return 64
        repl(table)
    elif not args:
        demo(table)
    else:
        for key in args:
            table.insert(key)
        print_table(table, "table")
    return 0


def run():
    sys.exit(main())

"""cli.py

Interactive command-line interface for the chained hash table.

Program flow when you run `python main.py --hashsize 26 --debug`:
  1) Parse the command line (--hashsize is required, --debug is optional).
  2) Latch the debug switch and set up the trace output.
  3) Build a table with the requested number of buckets.
  4) Loop over a small menu to add, list, search, or delete data.

Note:
- The CLI only translates results into text and exit codes; the chaining
  logic lives in hash_table.py.
"""

from __future__ import annotations

import argparse
import re
from typing import Callable, List, Optional

from hash_table import AllocationError, ChainedHashTable, InvalidConfigurationError, build
from models import DeleteResult, InsertResult, RunOptions
from util import Debug, configure_logging, strip_line_ending


EXIT_OK = 0
EXIT_USAGE = 1
EXIT_NO_MEMORY = 255   # exit(-1) as seen by the shell

MENU = (
    "   [1] Enter new data\n"
    "   [2] List table\n"
    "   [3] Search data\n"
    "   [4] Delete data\n"
    "   [5] Quit"
)
QUIT = '5'

# Leading integer, read the way scanf("%d") reads it: "01" and "1x" both mean 1.
_CHOICE = re.compile(r"\s*([+-]?\d+)")


def build_parser(prog: str = 'main.py') -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=prog,
        description="Fixed-size hash table with separate chaining.",
        epilog=(f"Example: {prog} --hashsize 26 --debug\n"
                f"Example: {prog} --hashsize 5\n\n"
                "--debug is the only optional argument."),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument('--hashsize', type=int, default=None, help="Number of buckets (must be > 0)")
    p.add_argument('--debug', action='store_true', help="Print DEBUG trace lines")
    return p


def parse_args(argv: Optional[List[str]] = None) -> Optional[RunOptions]:
    """Return RunOptions, or None (after printing the examples) if --hashsize is missing."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.hashsize is None:
        print("Not enough parameters\n")
        print(parser.epilog)
        return None
    return RunOptions(bucket_count=args.hashsize, debug=args.debug)


# -------------------------
# Menu actions
# -------------------------

def do_insert(table: ChainedHashTable, data: str) -> InsertResult:
    result = table.insert(data)
    if result is InsertResult.INSERTED:
        print(f"Data [{data}] added")
    elif result is InsertResult.ALREADY_EXISTS:
        print(f"Data [{data}] already exists")
    elif result is InsertResult.ALLOCATION_FAILURE:
        print(f"Unable to allocate memory for [{data}]")
    else:
        print("Empty data is not stored")
    return result


def do_list(table: ChainedHashTable) -> int:
    count = 0
    for index, payload in table.enumerate():
        print(f"Bucket[{index}] data:  [{payload}]")
        count += 1
    print(f"{count} entries")
    return count


def do_search(table: ChainedHashTable, data: str) -> bool:
    hit = table.search(data)
    if hit is None:
        print(f"Data [{data}] not found")
        return False
    print(f"Data [{data}] found in bucket [{hit.bucket}] in chain [{hit.position}]")
    return True


def do_delete(table: ChainedHashTable, data: str) -> bool:
    if table.delete(data) is DeleteResult.DELETED:
        print(f"Data [{data}] deleted")
        return True
    print(f"Data [{data}] not found")
    return False


def parse_choice(line: str) -> Optional[str]:
    """Return the menu number typed on `line` (as a string), or None."""
    m = _CHOICE.match(line)
    if m is None:
        return None
    return str(int(m.group(1)))


def run_menu(table: ChainedHashTable,
             prompt: Optional[Callable[[str], str]] = None) -> None:
    """Loop over the menu until Quit (or end of input).

    Input lines are traced through the table's own debug switch.
    """
    debug = table.debug
    prompt = prompt if prompt is not None else input

    # Choice -> (prompt text, trace label, action)
    actions = {
        '1': ("Enter new data:  ", "New data to add", do_insert),
        '3': ("Search data:  ", "Data to search", do_search),
        '4': ("Data to delete:  ", "Data to delete", do_delete),
    }

    while True:
        print(MENU)
        try:
            choice = parse_choice(prompt("   Choice:  "))
        except EOFError:
            choice = QUIT

        if choice in actions:
            text, label, action = actions[choice]
            try:
                data = strip_line_ending(prompt(text))
            except EOFError:
                choice = QUIT
            else:
                debug('%s: [%s]', label, data)
                action(table, data)
                continue

        if choice == '2':
            do_list(table)
        elif choice == QUIT:
            table.release()
            break
        else:
            print("Invalid option, please try again")


def run_cli(argv: Optional[List[str]] = None) -> int:
    """CLI entry point. Returns the process exit code."""
    options = parse_args(argv)
    if options is None:
        return EXIT_USAGE

    configure_logging()
    debug = Debug(options.debug)
    debug("Hash size: %d; Debug: %s.", options.bucket_count, "On" if debug.enabled else "Off")

    try:
        table = build(options.bucket_count, debug=debug)
    except InvalidConfigurationError as exc:
        print(f"Invalid --hashsize: {exc}")
        return EXIT_USAGE
    except AllocationError as exc:
        print(f"Failed to build the hash table: {exc}")
        return EXIT_NO_MEMORY

    run_menu(table)
    return EXIT_OK

"""Command line entry point: read a count and that many integers, then echo them."""

from __future__ import annotations

import argparse
import sys

from courtsim.person import _read_int

MAX_VALUES = 100


def main(argv: list[str] | None = None) -> int:
    """Read values from standard input and list them; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="courtsim",
        description="Read a count and that many integers from standard input.",
    )
    parser.parse_args(argv)

    out = sys.stdout
    reader = sys.stdin
    out.write("Hello, world!\n")
    out.write("Introduceți nr: ")
    try:
        count = _read_int(reader)
        if count > MAX_VALUES:
            raise ValueError(f"at most {MAX_VALUES} values can be read, got {count}")
        values = []
        for index in range(count):
            out.write(f"v[{index}] = ")
            values.append(_read_int(reader))
    except (ValueError, EOFError) as error:
        out.write("\n")
        sys.stderr.write(f"courtsim: {error}\n")
        return 1

    out.write("\n\n")
    out.write(f"Am citit de la tastatură {count} elemente:\n")
    for value in values:
        out.write(f"- {value}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
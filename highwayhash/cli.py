"""Command that prints the HighwayHash of a text given on the command line."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

from highwayhash.cat import HighwayHashCat
from highwayhash.core import hash64

__all__ = ["main"]

# A fixed demonstration key; use a different one so your hashes are your own.
_KEY = (1, 2, 3, 4)


def main(argv: Sequence[str] | None = None) -> int:
    """Hash the single text argument both in one shot and incrementally."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Please provide 1 argument with a text to hash")
        return 1

    data = os.fsencode(args[0])
    print(f"Hash   : {hash64(data, _KEY)}")

    cat = HighwayHashCat(_KEY)
    cat.append(data)
    print(f"HashCat: {cat.finish64()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
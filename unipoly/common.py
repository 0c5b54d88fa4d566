"""Utility functions and classes not found in the standard libraries.

Important functions and classes:
 - FrozenDict: a hashable immutable dictionary
 - open_maybe_stdin: open a path, treating "-" as standard input
 - find_one: first element of an iterable matching a predicate
"""

# builtins
import os
import sys

# 3rd party
from dictionaries import FrozenDict as _FrozenDict

class FrozenDict(_FrozenDict):
    """
    Immutable dictionary that is hashable (suitable for use in sets/maps).
    """

    def __repr__(self):
        return "FrozenDict({!r})".format(list(self.items()))

def open_maybe_stdin(f : str, mode="r"):
    """Open file f, or open standard input if f is "-".

    In any case, the caller is responsible for closing the returned handle.
    The safest usage of this function is

        with open_maybe_stdin(path) as f:
            ...
    """
    if f == "-":
        return os.fdopen(os.dup(sys.stdin.fileno()), mode)
    return open(f, mode)

def find_one(iter, pred=lambda x: True):
    for x in iter:
        if pred(x):
            return x
    return None

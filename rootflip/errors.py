"""Exceptions raised by rootflip."""


class InvalidTree(ValueError):
    """A tree structure violates the rooted-tree invariants.

    Raised for cycles, nodes attached to more than one parent, and malformed
    canonical strings or parent arrays.
    """

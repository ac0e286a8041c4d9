"""Base class for objects that can duplicate or hand over their state."""

from __future__ import annotations

import copy
from typing import TypeVar

__all__ = ["Clonable"]

C = TypeVar("C", bound="Clonable")


class Clonable:
    """An object that can be cloned deeply or moved into a new instance."""

    def clone(self: C) -> C:
        """Return an independent deep copy of this object."""
        return copy.deepcopy(self)

    def move(self: C) -> C:
        """Return a new object that takes over this object's state.

        The new object holds the very same attribute values; this object
        is left without any.
        """
        moved = copy.copy(self)
        state = getattr(self, "__dict__", None)
        if state is not None:
            state.clear()
        return moved
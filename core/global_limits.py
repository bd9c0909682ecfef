import logging
from typing import Optional

logger = logging.getLogger("stringlist.limits")


class GlobalLimits:
    """
    Holds the default capacity applied to every list that is built without an
    explicit bound, so callers can cap memory use in one place.
    A capacity of 0 means unbounded.

    ``DEFAULT_LIMITS`` is shared process-wide: changing its default bounds
    every later ``StringList()`` built with ``max_size=None``. Lists built
    before the change keep the bound they resolved at construction. Pass
    ``max_size=0`` to stay unbounded regardless of the default, or give a
    list its own ``limits=`` instance to keep the setting local.
    """

    def __init__(self, default_max_size: int = 0):
        self._default_max_size = self.clamp(default_max_size)

    @property
    def default_max_size(self) -> int:
        return self._default_max_size

    def set_default_max_size(self, value: int):
        """Clamp and store the default bound."""
        self._default_max_size = self.clamp(value)

    def clamp(self, value: int) -> int:
        if value < 0:
            logger.warning(f"Invalid max_size '{value}'. Falling back to unbounded")
            return 0
        return value

    def resolve(self, max_size: Optional[int]) -> int:
        """
        Turn the bound a list was constructed with into the effective one.
        None picks up the current default.
        """
        if max_size is None:
            return self._default_max_size
        return self.clamp(max_size)


DEFAULT_LIMITS = GlobalLimits()

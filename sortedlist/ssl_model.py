import logging
from typing import Optional

from linklist.sl_model import StringList

logger = logging.getLogger("stringlist.sorted")


class SortedStringList(StringList):
    """
    StringList kept in strictly ascending order with duplicates rejected.
    Insertion walks the chain from the head with a trailing predecessor id,
    since links only point forward.
    """

    def push(self, text: str, length: Optional[int] = None) -> bool:
        if self.full():
            logger.debug(f"Rejected '{text}': list is full ({self.max_size})")
            return False
        return self._insert_sorted(text if length is None else text[:length])

    def contains(self, text: str) -> bool:
        if (
            self._head is None
            or self.value_of(self._head) > text
            or self.value_of(self._tail) < text
        ):
            return False

        current = self._nodes[self._head]
        while current["next"] is not None and current["value"] < text:
            current = self._nodes[current["next"]]
        return current["value"] == text

    # ---------- Internal helpers ----------

    def _absorb(self, value: str) -> bool:
        return self._insert_sorted(value)

    def _insert_sorted(self, value: str) -> bool:
        if self._head is None or self.value_of(self._head) > value:
            self._link_head(self._make_node(value)["id"])
        elif self.value_of(self._tail) < value:
            self._link_tail(self._make_node(value)["id"])
        else:
            # head <= value <= tail: find the first node not less than value
            prev_id = None
            current_id = self._head
            while self.value_of(current_id) < value:
                prev_id = current_id
                current_id = self.next_of(current_id)

            if self.value_of(current_id) == value:
                logger.debug(f"Rejected '{value}': already present")
                return False

            self._link_after(prev_id, self._make_node(value)["id"])

        # positions shift on every insert, so the read cursor restarts at the head
        self._cursor.reset()
        return True

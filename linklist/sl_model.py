import itertools
import logging
from typing import Any, Dict, List, Optional

from core.global_limits import DEFAULT_LIMITS, GlobalLimits
from linklist.sl_cursor import StringCursor
from linklist.sl_parse import split_segments

logger = logging.getLogger("stringlist.model")


class StringList:
    """
    Insertion-ordered singly linked list of strings with an optional capacity.

    Nodes live in a dictionary keyed by id and link to each other by id, so
    head, tail and cursors are plain handles into that arena. Appending and
    popping from the front are O(1); indexed reads go through a cursor that
    makes ascending access cheap.
    """

    def __init__(self, max_size: Optional[int] = None, limits: Optional[GlobalLimits] = None):
        self._limits = limits or DEFAULT_LIMITS
        self.max_size = self._limits.resolve(max_size)
        self._id_iter = itertools.count()
        self._nodes: Dict[int, Dict[str, Any]] = {}
        self._head: Optional[int] = None
        self._tail: Optional[int] = None
        self._cursor = StringCursor(self)

    @classmethod
    def from_string(cls, text: str, delimiter: str, max_size: Optional[int] = None, **kwargs):
        string_list = cls(max_size, **kwargs)
        string_list.parse(text, delimiter)
        return string_list

    # ---------- Handles ----------

    @property
    def head_id(self) -> Optional[int]:
        return self._head

    @property
    def tail_id(self) -> Optional[int]:
        return self._tail

    def value_of(self, node_id: int) -> Optional[str]:
        node = self._nodes.get(node_id)
        return node["value"] if node else None

    def next_of(self, node_id: int) -> Optional[int]:
        node = self._nodes.get(node_id)
        return node["next"] if node else None

    # ---------- Mutation ----------

    def push(self, text: str, length: Optional[int] = None) -> bool:
        """
        Append ``text`` (or its first ``length`` characters) as the new tail.
        Returns False without touching the list when it is already full.
        """
        if self.full():
            logger.debug(f"Rejected '{text}': list is full ({self.max_size})")
            return False
        node = self._make_node(text if length is None else text[:length])
        self._link_tail(node["id"])
        return True

    def pop_first(self) -> str:
        if self._head is None:
            raise IndexError("pop from empty list")

        removed = self._nodes.pop(self._head)
        self._head = removed["next"]
        if self._head is None:
            self._tail = None
        self._cursor.reset()
        return removed["value"]

    def parse(self, text: str, delimiter: str):
        """Push every non-empty segment of ``text``; stops once the list is full."""
        for segment in split_segments(text, delimiter):
            if self.full():
                logger.debug(f"Parse stopped at '{segment}': list is full ({self.max_size})")
                break
            self.push(segment)

    def clear(self):
        self._nodes.clear()
        self._head = None
        self._tail = None
        self._cursor.reset()

    def move_from(self, other: "StringList"):
        """
        Take over the nodes of ``other``, appending them here until this list
        is full. ``other`` is always left empty; whatever did not fit is
        dropped.
        """
        if other is self:
            raise ValueError("cannot move a list into itself")

        visited = 0
        node_id = other.head_id
        while node_id is not None:
            if self.full():
                break
            value = other.value_of(node_id)
            if not self._absorb(value):
                logger.debug(f"Dropped '{value}' while moving: rejected by destination")
            visited += 1
            node_id = other.next_of(node_id)

        dropped = other.size() - visited
        if dropped:
            logger.warning(f"Dropped {dropped} node(s) while moving: destination is full ({self.max_size})")
        other.clear()

    # ---------- Reading ----------

    def get(self, index: int) -> str:
        return self._cursor.seek(index)

    def begin(self):
        self._cursor.reset()

    def iterate(self) -> str:
        value = self._cursor.current()
        self._cursor.advance()
        return value

    def available(self) -> bool:
        return self._cursor.available

    def cursor(self) -> StringCursor:
        """Independent cursor starting at the head."""
        return StringCursor(self)

    def contains(self, text: str) -> bool:
        node_id = self._head
        while node_id is not None:
            node = self._nodes[node_id]
            if node["value"] == text:
                return True
            node_id = node["next"]
        return False

    def size(self) -> int:
        return len(self._nodes)

    def full(self) -> bool:
        return self.max_size > 0 and self.size() >= self.max_size

    def snapshot(self) -> List[Dict]:
        ordered = []
        current = self._head
        while current is not None:
            node = self._nodes[current]
            ordered.append({"id": node["id"], "value": node["value"]})
            current = node["next"]
        return ordered

    def __len__(self):
        return self.size()

    def __iter__(self):
        return self.cursor()

    def __contains__(self, text):
        return self.contains(text)

    # ---------- Internal helpers ----------

    def _absorb(self, value: str) -> bool:
        self._link_tail(self._make_node(value)["id"])
        return True

    def _make_node(self, value: str) -> Dict[str, Any]:
        node_id = next(self._id_iter)
        node = {"id": node_id, "value": value, "next": None}
        self._nodes[node_id] = node
        return node

    def _link_tail(self, node_id: int):
        if self._head is None:
            self._head = node_id
            self._tail = node_id
            self._cursor.reset()
        else:
            self._nodes[self._tail]["next"] = node_id
            self._tail = node_id

    def _link_head(self, node_id: int):
        self._nodes[node_id]["next"] = self._head
        self._head = node_id
        if self._tail is None:
            self._tail = node_id
            self._cursor.reset()

    def _link_after(self, prev_id: int, node_id: int):
        self._nodes[node_id]["next"] = self._nodes[prev_id]["next"]
        self._nodes[prev_id]["next"] = node_id
        if prev_id == self._tail:
            self._tail = node_id

from typing import Optional


class StringCursor:
    """
    Forward-only read position over a StringList chain.

    The cursor only stores a node id and the index of that node, so it never
    keeps a node alive on its own. An id that is no longer in the owner's
    arena (popped, cleared, moved away) reads as exhausted.
    """

    def __init__(self, owner):
        self._owner = owner
        self.node_id: Optional[int] = owner.head_id
        self.position = 0

    def reset(self):
        self.node_id = self._owner.head_id
        self.position = 0

    @property
    def available(self) -> bool:
        return self.node_id is not None and self._owner.value_of(self.node_id) is not None

    def current(self) -> str:
        if self.node_id is None:
            return ""
        value = self._owner.value_of(self.node_id)
        return value if value is not None else ""

    def advance(self):
        if not self.available:
            self.node_id = None
            return
        self.node_id = self._owner.next_of(self.node_id)
        self.position += 1

    def seek(self, index: int) -> str:
        """
        Move to ``index`` and return the value there, or "" past the end.
        Going backwards restarts from the head; going forwards continues from
        where the cursor already is.
        """
        if index < self.position:
            self.reset()
        while self.available and self.position < index:
            self.advance()
        if index < 0:
            return ""
        return self.current()

    def __iter__(self):
        return self

    def __next__(self) -> str:
        if not self.available:
            raise StopIteration
        value = self.current()
        self.advance()
        return value

class Node:
    """A cell of a singly linked chain."""

    __slots__ = ("value", "next")

    def __init__(self, value):
        self.value = value
        self.next: Node | None = None

    def __repr__(self):
        return f"Node({self.value!r})"

import pytest

from linkedset.node import Node


def test_node_starts_unlinked():
    node = Node("a")
    assert node.value == "a"
    assert node.next is None


def test_node_links():
    head = Node(1)
    head.next = Node(2)
    assert head.next.value == 2
    assert head.next.next is None
    assert repr(head) == "Node(1)"


def test_node_slots():
    with pytest.raises(AttributeError):
        Node(1).data = 2

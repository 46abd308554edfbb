import pytest

from libft.linkedlist import LinkedList, Node


def test_build_from_items_keeps_order():
    items = ["a", "b", "c"]
    assert list(LinkedList(items)) == items


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.last() is None
    assert list(lst) == []


def test_len_counts_nodes():
    assert len(LinkedList(range(5))) == 5


def test_push_front_prepends():
    lst = LinkedList([2, 3])
    node = Node(1)
    lst.push_front(node)
    assert lst.head is node
    assert list(lst) == [1, 2, 3]


def test_push_front_on_empty():
    lst = LinkedList()
    lst.push_front(Node("x"))
    assert list(lst) == ["x"]
    assert lst.last() is lst.head


def test_push_back_appends():
    lst = LinkedList([1, 2])
    node = Node(3)
    lst.push_back(node)
    assert lst.last() is node
    assert list(lst) == [1, 2, 3]


def test_push_back_on_empty_sets_head():
    lst = LinkedList()
    node = Node("only")
    lst.push_back(node)
    assert lst.head is node


def test_push_back_attaches_chain():
    chain = Node(3, Node(4))
    lst = LinkedList([1, 2])
    lst.push_back(chain)
    assert list(lst) == [1, 2, 3, 4]


def test_push_rejects_non_node():
    lst = LinkedList()
    with pytest.raises(TypeError):
        lst.push_back("not a node")
    with pytest.raises(TypeError):
        lst.push_front(5)


def test_last_returns_final_node():
    lst = LinkedList(["a", "b", "c"])
    assert lst.last().content == "c"
    assert lst.last().next is None


def test_release_calls_delete_and_detaches():
    deleted = []
    node = Node("payload", Node("other"))
    node.release(deleted.append)
    assert deleted == ["payload"]
    assert node.next is None


def test_clear_deletes_every_content_in_order():
    deleted = []
    items = ["a", "b", "c"]
    lst = LinkedList(items)
    lst.clear(deleted.append)
    assert deleted == items
    assert lst.head is None
    assert len(lst) == 0


def test_iterate_visits_in_order():
    seen = []
    items = [5, 6, 7]
    LinkedList(items).iterate(seen.append)
    assert seen == items


def test_map_builds_new_list():
    source = LinkedList([1, 2, 3])
    mapped = source.map(lambda x: x * 10)
    assert list(mapped) == [x * 10 for x in source]
    assert list(source) == [1, 2, 3]
    assert mapped.head is not source.head


def test_map_empty():
    assert len(LinkedList().map(str)) == 0


def test_map_failure_deletes_partial_results():
    deleted = []

    def f(x):
        if x == 3:
            raise RuntimeError("boom")
        return x * 2

    with pytest.raises(RuntimeError):
        LinkedList([1, 2, 3, 4]).map(f, deleted.append)
    assert deleted == [2, 4]
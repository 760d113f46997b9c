import io

import pytest

from fillit.linked_list import LinkedList, Node, split_to_list


def test_construction_keeps_order_and_length():
    items = ["a", 1, None, (2, 3)]
    lst = LinkedList(items)
    assert list(lst) == items
    assert len(lst) == len(items)


def test_empty_list_has_zero_length():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.head is None


def test_add_front_prepends():
    lst = LinkedList(["b", "c"])
    node = lst.add_front("a")
    assert list(lst) == ["a", "b", "c"]
    assert lst.head is node
    assert node.next.content == "b"


def test_add_back_appends_and_works_on_empty():
    lst = LinkedList()
    lst.add_back("x")
    lst.add_back("y")
    assert list(lst) == ["x", "y"]
    assert lst.last() == "y"


def test_last_of_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().last()


def test_pop_front_returns_content_and_calls_on_delete():
    deleted = []
    lst = LinkedList(["one", "two"])
    assert lst.pop_front(deleted.append) == "one"
    assert deleted == ["one"]
    assert list(lst) == ["two"]


def test_pop_front_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().pop_front()


def test_clear_deletes_everything_in_order():
    deleted = []
    items = [3, 1, 2]
    lst = LinkedList(items)
    lst.clear(deleted.append)
    assert deleted == items
    assert len(lst) == 0


def test_clear_without_callback_empties():
    lst = LinkedList(range(5))
    lst.clear()
    assert list(lst) == []


def test_each_visits_every_content():
    seen = []
    items = ["p", "q", "r"]
    LinkedList(items).each(seen.append)
    assert seen == items


def test_map_builds_new_list_and_leaves_original():
    original = LinkedList(["ab", "c"])
    mapped = original.map(str.upper)
    assert list(mapped) == ["AB", "C"]
    assert list(original) == ["ab", "c"]
    assert mapped.head is not original.head


def test_print_strings_writes_lines():
    out = io.StringIO()
    LinkedList(["hello", "world"]).print_strings(out)
    assert out.getvalue() == "hello\nworld\n"


def test_print_strings_stops_at_none():
    out = io.StringIO()
    LinkedList(["first", None, "hidden"]).print_strings(out)
    assert out.getvalue() == "first\n"


def test_node_links():
    tail = Node("z")
    head = Node("y", tail)
    assert head.next is tail
    assert tail.next is None


def test_split_to_list_words():
    lst = split_to_list("**hello*world**", "*")
    assert list(lst) == ["hello", "world"]


def test_split_to_list_round_trip():
    words = ["alpha", "beta", "gamma"]
    assert list(split_to_list(" ".join(words), " ")) == words


def test_split_to_list_only_separators_gives_empty():
    assert len(split_to_list(",,,", ",")) == 0


def test_split_to_list_rejects_terminator_separator():
    with pytest.raises(ValueError):
        split_to_list("abc", "\0")
import io

from hypothesis import given
from hypothesis import strategies as st

from cupds.bstgeneric import Bst, compare_numeric, compare_words, main


def test_empty_tree():
    bst = Bst(compare_words)
    assert len(bst) == 0
    assert list(bst) == []
    assert list(bst.preorder()) == []
    assert list(bst.postorder()) == []


def test_words_come_out_sorted():
    bst = Bst(compare_words)
    words = ["pear", "apple", "fig", "banana", "cherry"]
    for word in words:
        bst.insert(word)
    assert list(bst.inorder()) == sorted(words)
    assert len(bst) == len(words)


def test_preorder_starts_and_postorder_ends_at_first_insert():
    bst = Bst(compare_words)
    for word in ["m", "c", "x", "a", "e"]:
        bst.insert(word)
    assert next(bst.preorder()) == "m"
    assert list(bst.postorder())[-1] == "m"
    assert sorted(bst.preorder()) == sorted(bst.postorder()) == list(bst)


def test_duplicates_are_kept():
    bst = Bst()
    for value in [3, 1, 3, 2, 3]:
        bst.insert(value)
    assert list(bst) == [1, 2, 3, 3, 3]
    assert len(bst) == 5


def test_numeric_order_differs_from_word_order():
    numbers = ["10", "9", "100", "2"]
    as_numbers = Bst(compare_numeric)
    as_words = Bst(compare_words)
    for text in numbers:
        as_numbers.insert(text)
        as_words.insert(text)
    assert list(as_numbers) == ["2", "9", "10", "100"]
    assert list(as_words) == sorted(numbers)


def test_compare_words_sign():
    assert compare_words("abc", "abd") < 0
    assert compare_words("abd", "abc") > 0
    assert compare_words("same", "same") == 0
    assert compare_words("ab", "abc") < 0


def test_compare_numeric_reads_leading_integer():
    assert compare_numeric("10", "9") > 0
    assert compare_numeric("-4", "3") < 0
    assert compare_numeric("7abc", "7") == 0
    assert compare_numeric("abc", "0") == 0


@given(st.lists(st.integers()))
def test_natural_order_inorder_is_sorted(values):
    bst = Bst()
    for value in values:
        bst.insert(value)
    assert list(bst) == sorted(values)
    assert len(bst) == len(values)


@given(st.lists(st.integers(min_value=-1000, max_value=1000)))
def test_numeric_compare_sorts_by_value(values):
    bst = Bst(compare_numeric)
    for value in values:
        bst.insert(str(value))
    assert [int(text) for text in bst] == sorted(values)


def test_main_words_until_exit(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("pear apple exit zebra\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "apple pear\n"


def test_main_numeric_count(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("10 9 100 5\n"))
    assert main(["3"]) == 0
    assert capsys.readouterr().out == "9 10 100\n"


def test_main_rejects_negative_count(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["-1"]) == 1
import pytest

from lexicon.trie import iter_nodes


def _check(lex):
    # no dead nodes below the root, root absent iff empty
    for path, node in iter_nodes(lex._root):
        if path:
            assert not node.is_dead(), f"dead node at {path!r}"
    assert (lex._root is None) == lex.is_empty()

    stored = {path for path, node in iter_nodes(lex._root) if node.is_word}
    assert stored == set(lex.to_set())
    assert lex.size() == len(stored) == len(lex.to_list())
    assert lex.to_list() == sorted(stored)


@pytest.fixture
def check_invariants():
    """Assert the trie and the word index agree and no dead nodes remain."""
    return _check

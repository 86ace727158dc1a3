from lexicon.trie import (
    TrieNode,
    ensure_path,
    iter_nodes,
    iter_subtree_words,
    trace_path,
    walk,
)


def _build(*words):
    root = TrieNode()
    for w in words:
        ensure_path(root, w).is_word = True
    return root


def test_new_node_is_dead():
    node = TrieNode()
    assert node.children == {}
    assert node.is_word is False
    assert node.is_dead()


def test_ensure_path_creates_missing_nodes_only():
    root = TrieNode()
    cat = ensure_path(root, "cat")
    assert list(root.children) == ["c"]
    assert ensure_path(root, "cat") is cat

    ensure_path(root, "car")
    assert sorted(root.children["c"].children["a"].children) == ["r", "t"]


def test_walk():
    root = _build("cat", "cats")
    assert walk(root, "cat").is_word
    assert not walk(root, "ca").is_word
    assert walk(root, "") is root
    assert walk(root, "cow") is None
    assert walk(None, "cat") is None
    assert walk(None, "") is None


def test_trace_path():
    root = _build("cat")
    edges = trace_path(root, "cat")
    assert [ch for _, ch in edges] == ["c", "a", "t"]
    assert edges[0][0] is root
    parent, ch = edges[-1]
    assert parent.children[ch].is_word

    assert trace_path(root, "cab") is None
    assert trace_path(root, "cats") is None
    assert trace_path(None, "cat") is None


def test_iter_subtree_words_in_key_order():
    root = _build("car", "cart", "cat", "ca", "dog")
    node = walk(root, "ca")
    assert list(iter_subtree_words(node, "ca")) == ["ca", "car", "cart", "cat"]
    assert list(iter_subtree_words(root, "")) == ["ca", "car", "cart", "cat", "dog"]


def test_iter_subtree_words_handles_very_long_words():
    word = "ab" * 5000
    root = _build(word)
    assert list(iter_subtree_words(root, "")) == [word]


def test_iter_nodes():
    root = _build("ab", "ac")
    paths = sorted(path for path, _ in iter_nodes(root))
    assert paths == ["", "a", "ab", "ac"]
    assert list(iter_nodes(None)) == []

import logging

from lexicon.constants import DEFAULT_WORD_FILES
from lexicon.loader import candidate_paths, load_lexicon


def test_candidate_paths_put_explicit_path_first():
    assert candidate_paths("mine.txt", ["a.txt"]) == ["mine.txt", "a.txt"]
    assert candidate_paths(None, ["a.txt"]) == ["a.txt"]
    assert candidate_paths() == DEFAULT_WORD_FILES


def test_load_explicit_path(tmp_path, caplog):
    path = tmp_path / "words.txt"
    path.write_text("alpha\nbeta\n", encoding="utf-8")
    with caplog.at_level(logging.INFO, logger="lexicon"):
        lex = load_lexicon(str(path), search_paths=[])
    assert lex.to_list() == ["alpha", "beta"]
    assert f"Loaded 2 words from {path}" in caplog.text


def test_load_skips_missing_and_empty_files(tmp_path):
    empty = tmp_path / "empty.txt"
    empty.write_text("\n\n", encoding="utf-8")
    good = tmp_path / "good.txt"
    good.write_text("gamma\n", encoding="utf-8")
    lex = load_lexicon(
        str(tmp_path / "missing.txt"),
        search_paths=[str(empty), str(good)],
    )
    assert lex.to_list() == ["gamma"]


def test_load_falls_back_to_empty_lexicon(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="lexicon"):
        lex = load_lexicon(str(tmp_path / "missing.txt"), search_paths=[])
    assert lex.is_empty()
    assert "No word file found" in caplog.text


def test_load_skips_undecodable_file(tmp_path, caplog):
    bad = tmp_path / "bad.txt"
    bad.write_bytes(b"\xff\xfe\xfa\n")
    good = tmp_path / "good.txt"
    good.write_text("delta\n", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="lexicon"):
        lex = load_lexicon(search_paths=[str(bad), str(good)])
    assert lex.to_list() == ["delta"]
    assert "Could not read" in caplog.text

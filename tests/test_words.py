import json

from morsedial.words import WordList, find_dictionary, load_words


def test_load_text(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("alpha\n\n# comment\n  bravo  \ncharlie\n", encoding="utf-8")
    assert load_words(str(path)) == ["alpha", "bravo", "charlie"]


def test_load_csv_first_column(tmp_path):
    path = tmp_path / "dict.csv"
    path.write_text("alpha,1\nbravo,2\n\ncharlie\n", encoding="utf-8")
    assert load_words(str(path)) == ["alpha", "bravo", "charlie"]


def test_load_json_keeps_positions(tmp_path):
    path = tmp_path / "dict.json"
    path.write_text(json.dumps(["alpha", "", None, "delta"]), encoding="utf-8")
    assert load_words(str(path)) == ["alpha", "", "", "delta"]


def test_find_dictionary_prefers_csv(tmp_path):
    assert find_dictionary(base_dir=str(tmp_path)) is None

    (tmp_path / "dict.json").write_text("[]", encoding="utf-8")
    assert find_dictionary(base_dir=str(tmp_path)).endswith("dict.json")

    (tmp_path / "dict.csv").write_text("a\n", encoding="utf-8")
    assert find_dictionary(base_dir=str(tmp_path)).endswith("dict.csv")


def test_word_list_reload(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("one\n", encoding="utf-8")

    words = WordList(str(path))
    assert words() == []
    assert words.reload() == 1
    assert words() == ["one"]

    path.write_text("one\ntwo\n", encoding="utf-8")
    words.reload()
    assert len(words) == 2


def test_word_list_bad_files_are_empty(tmp_path):
    missing = WordList(str(tmp_path / "nope.txt"))
    assert missing.reload() == 0

    path = tmp_path / "dict.json"
    path.write_text('{"not": "a list"}', encoding="utf-8")
    assert WordList(str(path)).reload() == 0

    path.write_text("[broken", encoding="utf-8")
    assert WordList(str(path)).reload() == 0

    assert WordList().reload() == 0

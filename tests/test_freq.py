from monosub.freq import char_frequencies, format_frequencies, plot_frequencies


def test_letter_frequencies():
    rows = char_frequencies("aab b!")
    assert rows == [("a", 2, 50.0), ("b", 2, 50.0)]


def test_all_char_frequencies():
    rows = char_frequencies("aab!", letters_only=False)
    assert rows == [("a", 2, 50.0), ("!", 1, 25.0), ("b", 1, 25.0)]


def test_empty_text():
    assert char_frequencies("  123 ") == []


def test_format_frequencies():
    out = format_frequencies([("e", 3, 75.0), ("t", 1, 25.0)])
    lines = out.split("\n")
    assert len(lines) == 3
    assert "75.00%" in lines[1]
    assert "'t'" in lines[2]


def test_plot_frequencies(tmp_path):
    path = tmp_path / "freq.png"
    plot_frequencies(char_frequencies("hello world"), str(path))
    assert path.exists()
    assert path.stat().st_size > 0

from pathlib import Path
import pytest

from subtlex import Norms


@pytest.mark.e2e
def test_frequency_scales_for_known_word(corpus_dir: Path):
    with Norms(corpus_dir) as norms:
        assert norms.frequency("the") == 29449.18
        assert norms.log_frequency("the") == 6.1766
        assert norms.zipf("the") == 7.468
        assert norms.frequency("the", "zipf") == 7.468
        assert norms.part_of_speech("the") == "Article"
        assert norms.part_of_speech("fiji") == "Name"


@pytest.mark.e2e
def test_absent_word_has_no_value_not_zero(corpus_dir: Path):
    with Norms(corpus_dir) as norms:
        assert norms.exists("zzz") is False
        for scale in ("raw", "log", "zipf"):
            assert norms.frequency("zzz", scale) is None
        assert norms.part_of_speech("zzz") is None


@pytest.mark.e2e
def test_lookups_ignore_case(corpus_dir: Path):
    with Norms(corpus_dir) as norms:
        assert norms.exists("THE") is True
        assert norms.exists("Frog") is True
        assert norms.frequency("FrOg") == 10.31


@pytest.mark.e2e
def test_batch_lookup_matches_single_lookups(corpus_dir: Path):
    words = ["the", "The", "frog", "zzz", "cat", "toxic"]
    with Norms(corpus_dir) as norms:
        for scale in ("raw", "log", "zipf"):
            batch = norms.frequencies(words, scale)
            assert list(batch) == words
            for w in words:
                assert batch[w] == norms.frequency(w, scale)


@pytest.mark.e2e
def test_first_match_wins_for_duplicate_rows(make_corpus, make_row):
    root = make_corpus(
        make_row("Cat", freq="1.00") + "\n"
        + make_row("cat", freq="2.00") + "\n"
        + make_row("hat", freq="3.00") + "\n"
    )
    with Norms(root) as norms:
        assert norms.frequency("cat") == 1.0
        assert norms.frequencies(["cat", "CAT"]) == {"cat": 1.0, "CAT": 1.0}
        # but every matching row counts as a neighbour
        assert norms.neighbors("hat") == (2, ["cat", "cat"])


@pytest.mark.e2e
def test_missing_part_of_speech_is_none(make_corpus, make_row):
    root = make_corpus(make_row("blick", pos="") + "\n")
    with Norms(root) as norms:
        assert norms.exists("blick")
        assert norms.part_of_speech("blick") is None


@pytest.mark.e2e
def test_unparseable_number_is_no_value(make_corpus, make_row, caplog):
    root = make_corpus(make_row("good") + "\n" + make_row("bad", freq="lots") + "\n")
    with caplog.at_level("WARNING", logger="subtlex.loader"), Norms(root) as norms:
        assert norms.frequency("good") == 1.0
        assert norms.frequency("bad") is None
        assert norms.zipf("bad") == 3.0
    assert "line 3" in caplog.text


@pytest.mark.e2e
def test_batch_matches_single_lookups_past_a_bad_row(make_corpus, make_row):
    root = make_corpus(make_row("bad", freq="lots") + "\n" + make_row("good") + "\n")
    with Norms(root) as norms:
        words = ["good", "bad", "zzz"]
        assert norms.frequencies(words) == {w: norms.frequency(w) for w in words}
        assert norms.frequencies(words) == {"good": 1.0, "bad": None, "zzz": None}
        assert norms.mean_frequency(words) == 1.0


@pytest.mark.e2e
def test_descriptive_statistics(corpus_dir: Path):
    with Norms(corpus_dir) as norms:
        assert norms.mean_frequency(["cat", "hat"]) == pytest.approx(53.825)
        assert norms.median_frequency(["cat", "hat", "cot"]) == pytest.approx(48.43)
        assert norms.sd_frequency(["cat", "hat"]) == pytest.approx(7.6297, abs=1e-4)
        # absent words are ignored, not counted as zero
        assert norms.mean_frequency(["cat", "zzz"]) == pytest.approx(59.22)
        assert norms.mean_frequency(["zzz"]) is None
        assert norms.sd_frequency(["cat"]) is None
        assert norms.mean_frequency(["cat", "hat"], "zipf") == pytest.approx(4.729)


@pytest.mark.e2e
@pytest.mark.parametrize("bad", ["", "   ", None, 5])
def test_missing_query_string_is_rejected(corpus_dir: Path, bad):
    with Norms(corpus_dir) as norms:
        with pytest.raises(ValueError):
            norms.exists(bad)
        with pytest.raises(ValueError):
            norms.frequency(bad)
        with pytest.raises(ValueError):
            norms.neighbors(bad)


@pytest.mark.e2e
def test_bad_scale_and_word_lists_are_rejected(corpus_dir: Path):
    with Norms(corpus_dir) as norms:
        with pytest.raises(ValueError):
            norms.frequency("the", "ln")
        with pytest.raises(ValueError):
            norms.frequencies("the")
        with pytest.raises(ValueError):
            norms.frequencies([])

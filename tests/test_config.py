import inspect

import pytest

from lyric_rhymes.config import ExtractionConfig, load_config


def test_defaults():
    config = ExtractionConfig()
    assert config.window_size == 4
    assert config.min_similarity == 0.7
    assert config.candidate_similarity == 0.3
    assert config.min_tail_length == 3
    assert config.max_candidates == 50
    assert config.collect_candidates is False


def test_config_is_immutable():
    config = ExtractionConfig()
    with pytest.raises(AttributeError):
        config.window_size = 10  # type: ignore[misc]
    assert config.replace(window_size=10).window_size == 10
    assert config.window_size == 4


@pytest.mark.parametrize(
    "changes",
    [
        {"window_size": 0},
        {"window_size": True},
        {"max_candidates": False},
        {"tail_syllables": -1},
        {"max_candidates": -5},
        {"min_similarity": 1.5},
        {"candidate_similarity": 0.8},
        {"min_verdict_confidence": -0.1},
    ],
)
def test_invalid_values_raise(changes):
    with pytest.raises(ValueError):
        ExtractionConfig(**changes)


def test_load_config_from_environment():
    config = load_config({"LYRIC_RHYMES_WINDOW_SIZE": "6", "LYRIC_RHYMES_MIN_SIMILARITY": "0.8"})
    assert config.window_size == 6
    assert config.min_similarity == 0.8
    assert config.max_candidates == 50


def test_load_config_ignores_blank_values(monkeypatch):
    monkeypatch.setenv("LYRIC_RHYMES_WINDOW_SIZE", " ")
    monkeypatch.delenv("LYRIC_RHYMES_MIN_SIMILARITY", raising=False)
    assert load_config() == ExtractionConfig()


def test_load_config_reports_bad_variable():
    with pytest.raises(ValueError, match="LYRIC_RHYMES_WINDOW_SIZE"):
        load_config({"LYRIC_RHYMES_WINDOW_SIZE": "four"})


def test_load_config_reads_tail_words():
    assert load_config({"LYRIC_RHYMES_TAIL_WORDS": "2"}).tail_words == 2


def test_pipeline_functions_share_default_config():
    from lyric_rhymes import rhymes, verification
    from lyric_rhymes.config import DEFAULT_CONFIG

    functions = [
        rhymes.create_unit,
        rhymes.extract_rhymes,
        verification.accept_verdicts,
        verification.verify_candidates,
        verification.extract_rhymes_with_verifier,
    ]
    for function in functions:
        assert inspect.signature(function).parameters["config"].default is DEFAULT_CONFIG

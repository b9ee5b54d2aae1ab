"""Unit tests for heading normalization and shape checks."""

import pytest

from heading_extractor.services.normalizer import (
    clean_heading_text,
    is_title_like,
    normalize_heading,
    stopword_ratio,
)


def test_clean_heading_is_unchanged():
    assert normalize_heading("Convolutional Neural Networks") == "Convolutional Neural Networks"


def test_whitespace_is_collapsed():
    assert normalize_heading("  Deep   Neural\tNetworks  ") == "Deep Neural Networks"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Model Architecture:", "Model Architecture"),
        ("Model Training -- ;", "Model Training"),
        ("Training Details....", "Training Details"),
        ("Previous CNN architectures...", "Previous CNN architectures"),
        ("Attention Heads . . .", "Attention Heads"),
    ],
)
def test_trailing_punctuation_is_stripped(raw, expected):
    assert normalize_heading(raw) == expected


def test_word_count_bound():
    twelve = "Deep" + " Model" * 11
    thirteen = "Deep" + " Model" * 12

    assert normalize_heading(twelve) == twelve
    assert normalize_heading(thirteen) is None


def test_empty_after_cleaning_is_rejected():
    assert normalize_heading("...") is None
    assert normalize_heading("   ") is None


def test_stopword_ratio_of_exactly_half_passes():
    assert normalize_heading("The Model") == "The Model"
    assert normalize_heading("a Model") == "a Model"


def test_stopword_ratio_above_half_is_rejected():
    assert normalize_heading("Of the Model") is None
    assert normalize_heading("in the Model of") is None


def test_title_like_token_required():
    assert normalize_heading("deep model training") is None
    assert normalize_heading("deep CNN model") == "deep CNN model"


def test_caseless_tokens_count_as_title_like():
    assert normalize_heading("deep model 42") == "deep model 42"
    assert normalize_heading("deep model 4") is None


def test_stopword_ratio_is_case_insensitive():
    assert stopword_ratio(["The", "Model"]) == 0.5
    assert stopword_ratio([]) == 0.0


def test_is_title_like():
    assert is_title_like("Model")
    assert is_title_like("CNN")
    assert not is_title_like("A")
    assert not is_title_like("model")


@pytest.mark.parametrize(
    "raw",
    [
        "  Deep   Neural Networks...  ",
        "Model Architecture:",
        "2.1 Model Architecture",
        "MODEL AND ARCHITECTURE",
        "Training Details -.-",
        "We use a ResNet-inspired model...",
    ],
)
def test_normalization_is_idempotent(raw):
    once = normalize_heading(raw)

    assert once is not None
    assert normalize_heading(once) == once
    assert clean_heading_text(once) == once


def test_only_ascii_whitespace_is_collapsed():
    assert clean_heading_text("Model\u2003 Architecture.") == "Model\u2003 Architecture"
    assert clean_heading_text("Model \t Architecture:") == "Model Architecture"

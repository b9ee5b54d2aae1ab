"""Shared word lists for heading relevance and shape checks."""

from __future__ import annotations

# Lower-case fragments that mark a heading as deep-learning related. Matched
# as plain substrings, so "modeled" and "CNNs" both qualify.
DEEP_LEARNING_KEYWORDS = (
    "deep",
    "neural",
    "network",
    "model",
    "models",
    "architecture",
    "cnn",
    "convolutional",
    "rnn",
    "lstm",
    "gru",
    "transformer",
    "attention",
    "training",
    "inference",
    "evaluation",
    "experiments",
)

# Common words counted when rejecting prose-like candidates.
HEADING_STOPWORDS = frozenset(
    {
        "a",
        "an",
        "the",
        "and",
        "or",
        "of",
        "in",
        "on",
        "for",
        "with",
        "to",
        "by",
        "from",
        "that",
        "this",
        "we",
        "is",
        "are",
        "was",
        "were",
        "be",
        "using",
        "based",
        "our",
        "as",
        "into",
        "over",
        "between",
        "at",
    }
)


__all__ = ["DEEP_LEARNING_KEYWORDS", "HEADING_STOPWORDS"]

"""Pytest configuration and fixtures for the heading extractor tests."""

import os

os.environ.setdefault("LOGFIRE_IGNORE_NO_CONFIG", "1")

import pytest

from heading_extractor.core.config import ExtractionConfig
from heading_extractor.services.samples import create_sample_papers

SAMPLE_HEADINGS = [
    "Convolutional Neural Networks",
    "Deep Neural Networks for image recognition",
    "Details about CNNs",
    "Experiments",
    "MODEL AND ARCHITECTURE",
    "Model Architecture",
    "Previous CNN architectures",
    "Training and Evaluation",
    "TRAINING PROCEDURE",
    "Transformers changed NLP",
    "We use a ResNet-inspired model",
]


@pytest.fixture(autouse=True)
def clean_heading_env(monkeypatch):
    """Keep HEADINGS_* settings from the developer's shell out of the tests."""
    for name in list(os.environ):
        if name.startswith("HEADINGS_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sample_papers_dir(tmp_path):
    """Directory holding the three demo papers."""
    papers = tmp_path / "papers"
    create_sample_papers(papers)
    return papers


@pytest.fixture
def expected_sample_headings():
    """Headings the demo papers produce, in case-insensitive order."""
    return list(SAMPLE_HEADINGS)


@pytest.fixture
def extraction_config(tmp_path):
    """Configuration writing into the test's temporary directory."""
    return ExtractionConfig(
        max_workers=4,
        output_path=tmp_path / "distinct_headings.txt",
        sample_dir=tmp_path / "papers_sample",
    )

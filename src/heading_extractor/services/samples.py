"""Demo papers used when the CLI is run without a papers directory."""

from __future__ import annotations

from pathlib import Path

import logfire

from heading_extractor.core.exceptions import SampleDataError

SAMPLE_PAPERS: dict[str, str] = {
    "paper1.txt": (
        "1 Introduction\n"
        "Deep learning models have shown...\n"
        "2 Related Work\n"
        "Previous CNN architectures...\n"
        "2.1 Convolutional Neural Networks\n"
        "Details about CNNs...\n"
        "3 Experiments\n"
        "Training and Evaluation\n"
    ),
    "paper2.md": (
        "# Abstract\n"
        "This paper describes a transformer-based model...\n"
        "# 1. Introduction\n"
        "Transformers changed NLP...\n"
        "## Model Architecture\n"
        "We propose a novel transformer architecture...\n"
        "## Experimental Setup\n"
    ),
    "paper3.txt": (
        "INTRODUCTION\n"
        "Deep Neural Networks for image recognition...\n"
        "MODEL AND ARCHITECTURE\n"
        "We use a ResNet-inspired model...\n"
        "TRAINING PROCEDURE\n"
    ),
}


def create_sample_papers(directory: str | Path) -> list[Path]:
    """Write the demo papers, creating the directory if needed.

    Existing files with the same names are overwritten.

    Raises:
        SampleDataError: If the directory or a paper cannot be written
    """
    root = Path(directory)
    written = []
    try:
        root.mkdir(parents=True, exist_ok=True)
        for name, content in SAMPLE_PAPERS.items():
            path = root / name
            path.write_text(content, encoding="utf-8")
            written.append(path)
    except OSError as e:
        raise SampleDataError(str(root), e) from e
    logfire.info("Sample papers written", directory=str(root), papers=len(written))
    return written


__all__ = ["SAMPLE_PAPERS", "create_sample_papers"]

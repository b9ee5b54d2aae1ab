"""Unit tests for per-document scanning."""

from pathlib import Path

import pytest

from heading_extractor.services.scanner import DocumentScanner, extract_heading


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("2.1 Convolutional Neural Networks", "Convolutional Neural Networks"),
        ("MODEL AND ARCHITECTURE", "MODEL AND ARCHITECTURE"),
        ("## 2.1 Model Architecture", "2.1 Model Architecture"),
        ("   ### Attention Mechanism:   ", "Attention Mechanism"),
        ("We propose a novel transformer architecture", None),
        ("## Experimental Setup", None),
        ("", None),
        ("   ", None),
    ],
)
def test_extract_heading_end_to_end(line, expected):
    assert extract_heading(line) == expected


def test_scan_lines_deduplicates_exact_strings_only():
    scanner = DocumentScanner()
    lines = [
        "## 2.1 Model Architecture",
        "",
        "  2.1 Convolutional Neural Networks  ",
        "We propose a novel transformer architecture",
        "## Experimental Setup",
        "MODEL AND ARCHITECTURE",
        "MODEL AND ARCHITECTURE",
        "## Model Architecture",
        "## MODEL ARCHITECTURE",
    ]

    headings, skipped = scanner.scan_lines(lines)

    assert skipped == 0
    assert headings == {
        "2.1 Model Architecture",
        "Convolutional Neural Networks",
        "MODEL AND ARCHITECTURE",
        "Model Architecture",
        "MODEL ARCHITECTURE",
    }


def test_undecodable_line_is_skipped():
    scanner = DocumentScanner()
    lines = [b"## Model Architecture", b"\xff\xfe Deep Model", "TRAINING PROCEDURE".encode()]

    headings, skipped = scanner.scan_lines(lines)

    assert skipped == 1
    assert headings == {"Model Architecture", "TRAINING PROCEDURE"}


def test_scan_reads_file_with_bad_bytes(tmp_path):
    doc = tmp_path / "paper.txt"
    doc.write_bytes(b"# Deep Models\r\n\xc3\x28 Broken Line Model\r\nLSTM BASELINES\n")

    result = DocumentScanner().scan(doc)

    assert result.ok
    assert result.document_id == str(doc)
    assert result.headings == {"Deep Models", "LSTM BASELINES"}
    assert result.skipped_lines == 1


def test_missing_document_yields_failed_result(tmp_path):
    result = DocumentScanner().scan(tmp_path / "missing.txt")

    assert not result.ok
    assert result.headings == set()
    assert "Cannot read document" in result.error


def test_supplier_read_error_is_isolated():
    def supplier(document_id: str):
        raise PermissionError(f"denied: {document_id}")

    result = DocumentScanner(line_supplier=supplier).scan("locked.md")

    assert not result.ok
    assert result.document_id == "locked.md"
    assert "PermissionError" in result.error


def test_whole_document_decode_error_is_a_read_failure(tmp_path):
    doc = tmp_path / "latin1.txt"
    doc.write_bytes("## Mod\xe8le Architecture\n".encode("latin-1"))

    scanner = DocumentScanner(
        line_supplier=lambda d: Path(d).read_text(encoding="utf-8").splitlines()
    )
    result = scanner.scan(doc)

    assert not result.ok
    assert result.headings == set()


def test_in_memory_supplier():
    documents = {"a": ["# Transformer Encoder", "text body"], "b": []}
    scanner = DocumentScanner(line_supplier=lambda d: documents[d])

    assert scanner.scan("a").headings == {"Transformer Encoder"}
    assert scanner.scan("b").headings == set()


def test_line_that_fails_to_process_is_skipped():
    lines = ["# Model Architecture", 42, "TRAINING PROCEDURE"]
    result = DocumentScanner(line_supplier=lambda d: lines).scan("mixed.md")

    assert result.ok
    assert result.headings == {"Model Architecture", "TRAINING PROCEDURE"}
    assert result.skipped_lines == 1


def test_scan_lines_keeps_going_after_a_failing_line():
    headings, skipped = DocumentScanner().scan_lines(
        [None, b"\xff\xfe broken", "## Convolutional Layers", object()]
    )

    assert headings == {"Convolutional Layers"}
    assert skipped == 3


def test_unicode_spaces_are_not_trimmed_from_lines():
    assert extract_heading("\u2003# Model Architecture") != "Model Architecture"
    assert extract_heading(" \t# Model Architecture\t") == "Model Architecture"

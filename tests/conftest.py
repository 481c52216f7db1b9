"""Pytest configuration and fixtures."""

import pytest


SAMPLE_CORPUS = """\
-DOCSTART-

Mario NPR adige20041007_id413250 B-PER
Rossi NPR adige20041007_id413250 I-PER
vive V adige20041007_id413250 O
a E adige20041007_id413250 O
Roma NPR adige20041007_id413250 B-GPE
. PUN adige20041007_id413250 O

La RS adige20041007_id413250 O
Fiat SPN adige20041007_id413250 B-ORG
apre V adige20041007_id413250 O
sul ES adige20041007_id413250 O
Garda SPN adige20041007_id413250 B-LOC
"""


@pytest.fixture
def corpus_text():
    """Two-sentence corpus with a document marker."""
    return SAMPLE_CORPUS


@pytest.fixture
def write_corpus(tmp_path):
    """Write corpus text to a temporary file and return its path."""

    def _write(text: str, name: str = "corpus.iob2", encoding: str = "utf-8"):
        path = tmp_path / name
        path.write_text(text, encoding=encoding)
        return path

    return _write


@pytest.fixture
def corpus_path(write_corpus, corpus_text):
    """Path to the sample corpus on disk."""
    return write_corpus(corpus_text)

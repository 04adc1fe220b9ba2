import pytest
import sys
from pathlib import Path

import fitz

# Add src to sys.path so we can import quiz_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


QUESTION_TEXT = """\
Exam dump - practice set
Topic 1 Question #2
A company needs shared file storage for Linux instances. (Choose two.)
A. Amazon EFS
B. Amazon S3
C. Amazon FSx for Lustre
D. Instance store
Topic 1 Question #1
Which service provides object storage?
A. EBS volume
B. S3 bucket
C. EFS share
Topic 1 Question #3
Which database engine is serverless and
scales to zero?
A. Aurora Serverless v2
B. RDS for MySQL
"""

SOLUTION_TEXT = """\
1] Correct answer: object storage in an Amazon S3 bucket
S3 is purpose-built object storage.
2] ans- A, C
Both are shared file systems.
3] Aurora Serverless v2
It scales automatically.
9] ans- B
No question for this one.
"""


# Common test fixtures
@pytest.fixture
def question_text() -> str:
    """Decoded question PDF text in the "Topic N Question #M" layout."""
    return QUESTION_TEXT


@pytest.fixture
def solution_text() -> str:
    """Solutions transcript matching question_text."""
    return SOLUTION_TEXT


@pytest.fixture
def make_pdf(tmp_path: Path):
    """Factory that writes a PDF with one page of text per argument."""
    def _make(*pages: str, name: str = "questions.pdf") -> Path:
        path = tmp_path / name
        doc = fitz.open()
        for text in pages:
            page = doc.new_page(width=595, height=842)  # A4 size
            page.insert_text((50, 72), text, fontsize=10)
        doc.save(path)
        doc.close()
        return path
    return _make

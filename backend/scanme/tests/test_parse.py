import fitz
import pytest

from scanme.errors import ExtractionTooShort, UnsupportedMediaType
from scanme.models import MediaType, media_type_for
from scanme.services.parse import extract_text

RESUME = (
    "Jane Doe\nSenior Backend Engineer\n"
    "Built payment APIs in Python and FastAPI, cut latency by 40%.\n"
)


def test_plain_text_is_returned_unchanged(temp_dir):
    assert extract_text(RESUME.encode("utf-8"), MediaType.PLAIN_TEXT, str(temp_dir)) == RESUME


def test_plain_text_too_short():
    with pytest.raises(ExtractionTooShort):
        extract_text(b"   short resume   " + b" " * 100, MediaType.PLAIN_TEXT)


def test_unsupported_type():
    with pytest.raises(UnsupportedMediaType):
        extract_text(RESUME.encode(), MediaType.OTHER)


def test_pdf_pages_joined_with_newlines(make_pdf, temp_dir):
    first = "Jane Doe Senior Backend Engineer Python FastAPI PostgreSQL"
    second = "Education BSc Computer Science 2015 University of Somewhere"
    text = extract_text(make_pdf(first, second), MediaType.PDF, str(temp_dir))

    assert text.split("\n") == [first, second]
    assert list(temp_dir.iterdir()) == []


def test_pdf_temp_file_removed_when_too_short(make_pdf, temp_dir):
    with pytest.raises(ExtractionTooShort):
        extract_text(make_pdf("Jane Doe"), MediaType.PDF, str(temp_dir))
    assert list(temp_dir.iterdir()) == []


def test_pdf_temp_file_removed_on_parse_error(temp_dir):
    with pytest.raises(fitz.FileDataError):
        extract_text(b"this is not a pdf at all", MediaType.PDF, str(temp_dir))
    assert list(temp_dir.iterdir()) == []


@pytest.mark.parametrize("content_type, expected", [
    ("application/pdf", MediaType.PDF),
    ("text/plain", MediaType.PLAIN_TEXT),
    ("text/plain; charset=utf-8", MediaType.PLAIN_TEXT),
    ("application/vnd.openxmlformats-officedocument.wordprocessingml.document", MediaType.OTHER),
    (None, MediaType.OTHER),
])
def test_media_type_for(content_type, expected):
    assert media_type_for(content_type) == expected

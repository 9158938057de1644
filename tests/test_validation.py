"""Tests for user input validation"""
import pytest
from skillmatch.errors import InputValidationError
from skillmatch.validation import (
    ResumeFormat, detect_format, validate_resume_upload, validate_job_description,
    validate_signup_password, MAX_RESUME_BYTES
)


@pytest.mark.parametrize("filename,content_type,expected", [
    ("cv.pdf", None, ResumeFormat.PDF),
    ("cv.DOCX", None, ResumeFormat.DOCX),
    ("cv.txt", None, ResumeFormat.TEXT),
    ("upload", "application/pdf", ResumeFormat.PDF),
    ("upload", "text/plain; charset=utf-8", ResumeFormat.TEXT),
    ("cv.png", "image/png", None),
])
def test_detect_format(filename, content_type, expected):
    assert detect_format(filename, content_type) == expected


def test_upload_rejects_unknown_type():
    with pytest.raises(InputValidationError) as exc_info:
        validate_resume_upload("photo.jpg", 100)
    assert exc_info.value.message == "Please upload a PDF, DOCX, or TXT file"


def test_upload_size_limit():
    assert validate_resume_upload("cv.pdf", MAX_RESUME_BYTES) == ResumeFormat.PDF
    with pytest.raises(InputValidationError) as exc_info:
        validate_resume_upload("cv.pdf", MAX_RESUME_BYTES + 1)
    assert exc_info.value.message == "File size exceeds 5MB limit"


def test_job_description_minimum_length():
    with pytest.raises(InputValidationError) as exc_info:
        validate_job_description("   too short   ")
    assert exc_info.value.field == "job_description"

    text = "x" * 50
    assert validate_job_description(f"  {text}  ") == text


def test_job_description_whitespace_does_not_count():
    with pytest.raises(InputValidationError):
        validate_job_description(" " * 40 + "y" * 49 + " " * 40)


def test_signup_password_rules():
    with pytest.raises(InputValidationError) as exc_info:
        validate_signup_password("secret1", "secret2")
    assert exc_info.value.message == "Passwords do not match"

    with pytest.raises(InputValidationError) as exc_info:
        validate_signup_password("abc", "abc")
    assert exc_info.value.message == "Password must be at least 6 characters long"

    validate_signup_password("abcdef", "abcdef")

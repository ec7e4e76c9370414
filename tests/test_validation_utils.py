import pytest

from utils.sms_utils import build_full_name, build_thanks_sms
from utils.validation_utils import clean_text, is_email, normalize_phone, sanitize_submission


@pytest.mark.parametrize("raw, expected", [
    ("0771234567", "94771234567"),
    ("94771234567", "94771234567"),
    ("094771234567", "94771234567"),
    ("+94 77 123 4567", "94771234567"),
    ("077-123-4567", "94771234567"),
    ("12345", "12345"),
    ("1771234567", "1771234567"),
    ("0094771234567", "0094771234567"),
    ("077123456７", "077123456"),
    ("٠7712345678", "7712345678"),
])
def test_normalize_phone(raw, expected):
    assert normalize_phone(raw) == expected


@pytest.mark.parametrize("raw", ["", None, "n/a", "  -  ", "０７７１２３４５６７", "٠٧٧١٢٣٤٥٦٧"])
def test_normalize_phone_without_digits(raw):
    assert normalize_phone(raw) is None


@pytest.mark.parametrize("raw", ["0771234567", "094771234567", "94771234567"])
def test_normalize_phone_is_idempotent(raw):
    once = normalize_phone(raw)
    assert normalize_phone(once) == once


def test_clean_text_collapses_and_trims():
    assert clean_text("  Hello \n\t world  ") == "Hello world"


def test_clean_text_caps_length_after_trimming():
    assert clean_text("   " + "a" * 120, 100) == "a" * 100


def test_clean_text_coerces_values():
    assert clean_text(None) == ""
    assert clean_text(771234567) == "771234567"


@pytest.mark.parametrize("value, expected", [
    ("nimal@example.lk", True),
    ("first.last@mail.co.uk", True),
    ("not-an-email", False),
    ("missing@tld", False),
    ("two@@example.com", False),
    ("spaces in@example.com", False),
    ("", False),
    (None, False),
])
def test_is_email(value, expected):
    assert is_email(value) is expected


def test_sanitize_submission_valid(valid_form):
    result = sanitize_submission(valid_form)

    assert result.is_valid
    assert result.values == {
        "first_name": "Nimal",
        "last_name": "Perera",
        "email": "nimal@example.lk",
        "number": "077 123 4567",
        "subject": "Website quote",
        "message": "Hello, I need a landing page.",
    }


@pytest.mark.parametrize("field", ["first_name", "last_name", "email", "number", "message"])
def test_sanitize_submission_requires_field(valid_form, field):
    valid_form.pop(field)
    result = sanitize_submission(valid_form)

    assert not result.is_valid
    assert result.errors == [field]


def test_sanitize_submission_whitespace_only_is_missing(valid_form):
    valid_form["message"] = " \n\t "
    assert sanitize_submission(valid_form).errors == ["message"]


def test_sanitize_submission_rejects_malformed_email(valid_form):
    valid_form["email"] = "not-an-email"
    assert sanitize_submission(valid_form).errors == ["email"]


def test_sanitize_submission_subject_optional(valid_form):
    valid_form.pop("subject")
    result = sanitize_submission(valid_form)

    assert result.is_valid
    assert result.values["subject"] == ""


def test_sanitize_submission_caps_lengths(valid_form):
    valid_form["first_name"] = "N" * 150
    valid_form["message"] = "m" * 2500
    result = sanitize_submission(valid_form)

    assert len(result.values["first_name"]) == 100
    assert len(result.values["message"]) == 2000


def test_sanitize_submission_reports_every_bad_field():
    result = sanitize_submission({"email": "nope"})
    assert result.errors == ["first_name", "last_name", "email", "number", "message"]


def test_build_thanks_sms():
    text = build_thanks_sms("Nimal Perera")
    assert text.startswith("Hi Nimal Perera, thanks for contacting LogozoDev.")
    assert text.endswith("LogozoDev")


def test_build_thanks_sms_blank_name():
    assert build_thanks_sms("   ").startswith("Hi there,")


def test_build_full_name():
    assert build_full_name("Nimal", "Perera") == "Nimal Perera"
    assert build_full_name("Nimal", None) == "Nimal"

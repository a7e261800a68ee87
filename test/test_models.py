import pytest
from pydantic import ValidationError

from gtinfix.models import GtinCode


def test_default_length_is_13():
    assert GtinCode(code="4006381333931").code == "4006381333931"


def test_repair_normalizes_code():
    item = GtinCode(code=" 87248795257", length=12)
    assert item.code == "087248795257"
    assert item.length == 12


def test_strict_mode_rejects_repairable_code():
    with pytest.raises(ValidationError) as exc:
        GtinCode(code="87248795257", length=12, repair=False)
    errors = exc.value.errors()
    assert len(errors) == 1
    assert errors[0]["type"] == "gtin_check_digit"
    assert errors[0]["loc"] == ("code",)


@pytest.mark.parametrize(
    "code, length, kind",
    [
        ("0000000000000", 12, "gtin_too_long"),
        ("❤", 8, "gtin_non_ascii"),
        ("123456789013", 12, "gtin_check_digit"),
    ],
)
def test_failure_kinds(code, length, kind):
    with pytest.raises(ValidationError) as exc:
        GtinCode(code=code, length=length)
    assert [e["type"] for e in exc.value.errors()] == [kind]


def test_unsupported_length_reported_once():
    with pytest.raises(ValidationError) as exc:
        GtinCode(code="1234567", length=7)
    errors = exc.value.errors()
    assert len(errors) == 1
    assert errors[0]["loc"] == ("length",)


def test_frozen():
    item = GtinCode(code="05766796", length=8)
    with pytest.raises(ValidationError):
        item.code = "12345670"


def test_length_and_repair_validated_before_code():
    assert list(GtinCode.model_fields) == ["length", "repair", "code"]

from __future__ import annotations

import pytest

from directory.domain.employees import EmployeePayload
from directory.services.validation import ValidationError, sanitize_payload


def _body(**overrides):
    body = {
        "name": "Grace",
        "title": "Rear Admiral",
        "department": "Navy",
        "location": "Arlington",
        "salary": 90000,
        "hireDate": "1943-12-01",
    }
    body.update(overrides)
    return body


def test_normalizes_strings_salary_and_date():
    payload = sanitize_payload(
        _body(name="  Ada  ", salary=50000.6, hireDate="2024-03-05T10:00:00Z")
    )

    assert payload == EmployeePayload(
        name="Ada",
        title="Rear Admiral",
        department="Navy",
        location="Arlington",
        salary=50001,
        hire_date="2024-03-05",
    )


def test_salary_accepts_numeric_strings_and_rounds_half_up():
    assert sanitize_payload(_body(salary=" 1234.5 ")).salary == 1235
    assert sanitize_payload(_body(salary=0.5)).salary == 1
    assert sanitize_payload(_body(salary=-0.5)).salary == 0
    assert isinstance(sanitize_payload(_body(salary=10.0)).salary, int)


def test_hire_date_drops_time_and_offset():
    assert sanitize_payload(_body(hireDate="2024-03-05T23:30:00-05:00")).hire_date == "2024-03-05"
    assert sanitize_payload(_body(hireDate=" 2024-01-15 ")).hire_date == "2024-01-15"


@pytest.mark.parametrize("field", ["name", "title", "department", "location", "hireDate"])
def test_blank_or_missing_string_fields_are_rejected(field):
    with pytest.raises(ValidationError) as blank:
        sanitize_payload(_body(**{field: "   "}))
    assert blank.value.field == field
    assert str(blank.value) == f"{field} is required"

    body = _body()
    del body[field]
    with pytest.raises(ValidationError) as missing:
        sanitize_payload(body)
    assert missing.value.field == field


def test_non_string_text_field_is_rejected():
    with pytest.raises(ValidationError) as exc:
        sanitize_payload(_body(title=42))
    assert exc.value.field == "title"


@pytest.mark.parametrize("salary", ["abc", "", None, float("nan"), float("inf"), True, [1]])
def test_bad_salary_is_rejected(salary):
    with pytest.raises(ValidationError) as exc:
        sanitize_payload(_body(salary=salary))
    assert exc.value.field == "salary"
    assert exc.value.message == "salary must be a number"


def test_missing_salary_is_rejected():
    body = _body()
    del body["salary"]
    with pytest.raises(ValidationError) as exc:
        sanitize_payload(body)
    assert exc.value.field == "salary"


@pytest.mark.parametrize("hire_date", ["not-a-date", "2024-02-30", "15/01/2024"])
def test_unparseable_hire_date_is_rejected(hire_date):
    with pytest.raises(ValidationError) as exc:
        sanitize_payload(_body(hireDate=hire_date))
    assert exc.value.field == "hireDate"
    assert exc.value.message == "hireDate must be a valid date"


def test_checks_stop_at_first_failure_in_order():
    with pytest.raises(ValidationError) as exc:
        sanitize_payload({"salary": "abc", "hireDate": "nope"})
    assert exc.value.field == "name"

    with pytest.raises(ValidationError) as exc:
        sanitize_payload(_body(salary="abc", hireDate="nope"))
    assert exc.value.field == "salary"

    with pytest.raises(ValidationError) as exc:
        sanitize_payload(_body(salary="abc", hireDate=""))
    assert exc.value.field == "hireDate"
    assert exc.value.message == "hireDate is required"


def test_does_not_mutate_input():
    body = _body(name="  Ada  ")
    sanitize_payload(body)
    assert body["name"] == "  Ada  "


@pytest.mark.parametrize("salary", ["1_000", "_1000", "1__0"])
def test_salary_with_digit_separators_is_rejected(salary):
    with pytest.raises(ValidationError) as exc:
        sanitize_payload(_body(salary=salary))
    assert exc.value.field == "salary"


@pytest.mark.parametrize(
    "hire_date",
    ["2024-03-05T10:00:00.1Z", "2024-03-05T10:00:00z", "2024-03-05 10:00", "20240305"],
)
def test_iso_variants_normalize_to_calendar_date(hire_date):
    assert sanitize_payload(_body(hireDate=hire_date)).hire_date == "2024-03-05"

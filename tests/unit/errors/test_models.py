"""Tests for NetSuite error document models."""

import pytest

from netsuite_sdk.errors.models import ErrorDetailEntry, NetSuiteErrorDetail


@pytest.mark.unit
def test_parse_error_document():
    body = {
        "type": "https://www.rfc-editor.org/rfc/rfc9110.html#section-15.5.1",
        "title": "Bad Request",
        "status": 400,
        "o:errorDetails": [
            {
                "detail": "Invalid value for the resource or sub-resource field 'entity'.",
                "o:errorPath": "entity",
                "o:errorCode": "INVALID_VALUE",
            }
        ],
    }

    detail = NetSuiteErrorDetail.from_body(body)

    assert detail is not None
    assert detail.title == "Bad Request"
    assert detail.status == 400
    assert detail.error_details == [
        ErrorDetailEntry(
            detail="Invalid value for the resource or sub-resource field 'entity'.",
            error_code="INVALID_VALUE",
            error_path="entity",
        )
    ]


@pytest.mark.unit
def test_non_error_body_returns_none():
    assert NetSuiteErrorDetail.from_body({"items": []}) is None
    assert NetSuiteErrorDetail.from_body("oops") is None
    assert NetSuiteErrorDetail.from_body(None) is None


@pytest.mark.unit
def test_to_exception_message():
    detail = NetSuiteErrorDetail(
        title="Bad Request",
        detail="Invalid field",
        error_code="INVALID_FLD",
        error_details=[ErrorDetailEntry(detail="Unknown field", error_path="custentity_x")],
    )

    message = detail.to_exception_message()

    assert message.splitlines() == [
        "Bad Request",
        "Invalid field",
        "Error Code: INVALID_FLD",
        "  - Unknown field (path: custentity_x)",
    ]


@pytest.mark.unit
def test_empty_detail_message():
    assert NetSuiteErrorDetail().to_exception_message() == "Unknown NetSuite error"

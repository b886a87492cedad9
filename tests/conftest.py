"""Shared payload fixtures."""

import json

import pytest

MESSAGE_NAME = "locationSchedule.employee.getScheduleForEmployeeList.response"


def _sockjs_frame(*messages) -> str:
    return "a" + json.dumps([json.dumps(m) for m in messages])


@pytest.fixture
def make_frame():
    """Build a SockJS array frame from message dicts."""
    return _sockjs_frame


@pytest.fixture
def schedule_payload():
    """A getScheduleForEmployeeList response for Monday 11 August 2025.

    The late shift is listed first and the early shift appears twice, once
    under ``shifts`` and once under ``scheduleItems``.
    """
    early = {
        "id": "E1",
        "startDateTime": "2025-08-11T08:00:00",
        "endDateTime": "2025-08-11T14:30:00",
        "employee": {"id": 501, "qualifier": "1001"},
    }
    late = {
        "id": "E1",
        "startDateTime": "2025-08-11T14:30:00",
        "endDateTime": "2025-08-11T22:00:00",
        "employee": {"id": 502, "qualifier": "1002"},
    }
    return {
        "name": MESSAGE_NAME,
        "payload": {
            "employees": [
                {"id": 501, "qualifier": "1001", "fullName": "Jane Doe"},
                {
                    "employeeRef": {"id": 502, "qualifier": "1002"},
                    "firstName": "John",
                    "lastName": "Smith",
                },
            ],
            "schedule": {
                "shifts": [
                    late,
                    early,
                    {
                        "itemType": "BREAK",
                        "startDateTime": "2025-08-11T11:00:00",
                        "endDateTime": "2025-08-11T11:30:00",
                        "employee": {"id": 501, "qualifier": "1001"},
                    },
                ],
                "scheduleItems": [
                    dict(early),
                    {
                        "type": "Time Off",
                        "startDateTime": "2025-08-12T00:00:00",
                        "endDateTime": "2025-08-12T23:59:00",
                        "employee": {"id": 502, "qualifier": "1002"},
                    },
                    {
                        "isOpenShift": True,
                        "startDateTime": "2025-08-13T09:00:00",
                        "endDateTime": "2025-08-13T17:00:00",
                        "employee": {"id": 0, "qualifier": "OPEN"},
                    },
                ],
            },
        },
    }


@pytest.fixture
def schedule_frame(schedule_payload):
    """The schedule payload wrapped in a SockJS array frame."""
    return _sockjs_frame(schedule_payload)


@pytest.fixture
def expected_csv():
    """CSV bytes expected when exporting 2025-08-11 from schedule_payload."""
    return (
        "Day,EmployeeID,Employee Name,Shift Start,Shift End,Break Required\r\n"
        "Monday 11/08/2025,1001,Jane Doe,08:00,14:30,No\r\n"
        "Monday 11/08/2025,1002,John Smith,14:30,22:00,Yes"
    ).encode("utf-8")

"""Tests for RosterSession snapshot handling and export delivery."""

import json

import pytest

from ukgroster.exceptions import InvalidDateError, NoShiftsForDateError
from ukgroster.extraction.config import ExtractionConfig
from ukgroster.output.delivery import DirectoryDelivery
from ukgroster.session import RosterSession

MESSAGE_NAME = "locationSchedule.employee.getScheduleForEmployeeList.response"


def _week_payload(start_day: int, name: str = "Jane Doe"):
    """Payload with one 8-hour shift per day for three days."""
    return {
        "name": MESSAGE_NAME,
        "employees": [{"id": 1, "qualifier": "1001", "fullName": name}],
        "shifts": [
            {
                "startDateTime": f"2025-08-{day:02d}T09:00:00",
                "endDateTime": f"2025-08-{day:02d}T17:00:00",
                "employee": {"id": 1, "qualifier": "1001"},
            }
            for day in range(start_day, start_day + 3)
        ],
    }


class TestRosterSession:
    """Tests for RosterSession."""

    @pytest.fixture
    def published(self):
        return []

    @pytest.fixture
    def notices(self):
        return []

    @pytest.fixture
    def session(self, published, notices, tmp_path):
        return RosterSession(
            on_dates=published.append,
            on_notice=notices.append,
            delivery=DirectoryDelivery(tmp_path),
        )

    def test_schedule_frame_replaces_snapshot(self, session, schedule_frame, published):
        assert session.handle_message(schedule_frame) is True
        assert len(session.snapshot.shifts) == 2
        assert session.snapshot.employee_names["1001"] == "Jane Doe"
        assert published == [["2025-08-11"]]
        assert session.published_dates == ["2025-08-11"]

    def test_bytes_messages_accepted(self, session, schedule_frame):
        assert session.handle_message(schedule_frame.encode("utf-8")) is True

    def test_other_messages_filtered(self, session, make_frame, published):
        payload = _week_payload(11)
        payload["name"] = "locationSchedule.employee.getTimeOff"
        assert session.handle_message(make_frame(payload)) is False
        assert session.snapshot.is_empty
        assert published == []

    def test_filter_can_be_disabled(self, session, make_frame):
        payload = _week_payload(11)
        del payload["name"]
        assert session.handle_message(make_frame(payload), filter_messages=False) is True
        assert session.handle_frame(json.dumps(payload)) is True

    def test_custom_prefix(self, make_frame):
        session = RosterSession(config=ExtractionConfig(message_prefix="roster."))
        payload = _week_payload(11)
        payload["name"] = "roster.week"
        assert session.handle_message(make_frame(payload)) is True

    @pytest.mark.parametrize("frame", ["o", "h", "a[]", "garbage"])
    def test_irrelevant_frames_keep_state(self, session, schedule_frame, frame):
        session.handle_message(schedule_frame)
        before = session.snapshot
        assert session.handle_message(frame) is False
        assert session.snapshot is before

    def test_payload_without_shifts_keeps_state(self, session, schedule_frame):
        session.handle_message(schedule_frame)
        before = session.snapshot
        frame = json.dumps({"name": MESSAGE_NAME, "employees": [{"id": 9, "name": "New"}]})
        assert session.handle_message(frame) is False
        assert session.snapshot is before

    def test_payload_without_parseable_dates_keeps_state(self, session, schedule_frame):
        session.handle_message(schedule_frame)
        before = session.snapshot
        payload = {
            "name": MESSAGE_NAME,
            "shifts": [{"start": "later", "end": "even later", "employee": {"id": 1}}],
        }
        assert session.handle_message(json.dumps(payload)) is False
        assert session.snapshot is before

    def test_time_or_weekday_only_values_publish_no_dates(self, session, published):
        """Values naming no calendar date are not given today's date."""
        payload = {
            "name": MESSAGE_NAME,
            "shifts": [
                {"startDateTime": "Monday", "endDateTime": "Tuesday", "employee": {"id": 1}},
                {"startTime": "10:00", "endTime": "5pm", "employee": {"id": 2}},
            ],
        }
        assert session.handle_message(json.dumps(payload)) is False
        assert session.snapshot.is_empty
        assert published == []

    def test_same_dates_published_once(self, session, make_frame, published):
        session.handle_message(make_frame(_week_payload(11)))
        session.handle_message(make_frame(_week_payload(11, name="Jane D.")))
        assert published == [["2025-08-11", "2025-08-12", "2025-08-13"]]

    def test_new_week_republished(self, session, make_frame, published):
        session.handle_message(make_frame(_week_payload(11)))
        session.handle_message(make_frame(_week_payload(18)))
        assert published[-1] == ["2025-08-18", "2025-08-19", "2025-08-20"]
        assert len(published) == 2
        assert session.available_dates() == published[-1]

    def test_snapshot_replaced_not_merged(self, session, make_frame):
        """Shifts and names of an earlier payload do not survive a newer one."""
        session.handle_message(make_frame(_week_payload(11, name="Jane Doe")))
        newer = _week_payload(18, name="Jane Newname")
        newer["employees"] = [{"qualifier": "1001", "fullName": "Jane Newname"}]
        session.handle_message(make_frame(newer))
        assert session.snapshot.employee_names == {"1001": "Jane Newname"}
        with pytest.raises(NoShiftsForDateError):
            session.export("2025-08-11")

    def test_export_uses_snapshot_current_when_run(self, session, make_frame):
        session.handle_message(make_frame(_week_payload(11)))
        chosen = session.published_dates[0]
        session.handle_message(make_frame(_week_payload(11, name="Renamed")))
        assert session.export(chosen).rows[0].employee_name == "Renamed"

    def test_export_and_deliver_writes_csv(self, session, schedule_frame, expected_csv, tmp_path):
        session.handle_message(schedule_frame)
        path = session.export_and_deliver("2025-08-11")
        assert path == tmp_path / "ukg_roster_2025-08-11.csv"
        assert path.read_bytes() == expected_csv

    def test_empty_export_notifies_without_file(self, session, schedule_frame, notices, tmp_path):
        session.handle_message(schedule_frame)
        assert session.export_and_deliver("2025-08-14") is None
        assert notices == ["No shifts found for 2025-08-14."]
        assert list(tmp_path.iterdir()) == []

    def test_export_before_any_payload(self, session, notices):
        assert session.export_and_deliver("2025-08-11") is None
        assert notices == ["No shifts found for 2025-08-11."]

    def test_invalid_date_raises(self, session, schedule_frame):
        session.handle_message(schedule_frame)
        with pytest.raises(InvalidDateError):
            session.export_and_deliver("Monday")

    def test_unknown_format_raises(self, session, schedule_frame):
        session.handle_message(schedule_frame)
        with pytest.raises(ValueError):
            session.export_and_deliver("2025-08-11", fmt="xlsx")

    def test_delivery_required(self, schedule_frame):
        session = RosterSession()
        session.handle_message(schedule_frame)
        with pytest.raises(ValueError):
            session.export_and_deliver("2025-08-11")

    def test_max_dates_from_config(self, make_frame, published):
        session = RosterSession(config=ExtractionConfig(max_dates=2), on_dates=published.append)
        session.handle_message(make_frame(_week_payload(11)))
        assert published == [["2025-08-11", "2025-08-12"]]

import logging

from eshook.envelope import LogEntry, LogEnvelope, format_rfc3339_nano
from eshook.levels import Level


def test_rfc3339_nano_formatting():
    assert format_rfc3339_nano(0) == "1970-01-01T00:00:00Z"
    assert format_rfc3339_nano(1_500_000_000) == "1970-01-01T00:00:01.5Z"
    assert format_rfc3339_nano(1_700_000_000_000_000_001) == "2023-11-14T22:13:20.000000001Z"
    assert format_rfc3339_nano(1_700_000_000_120_000_000) == "2023-11-14T22:13:20.12Z"


def test_envelope_from_entry():
    t_ns = 1_700_000_000_123_456_789
    entry = LogEntry(time_ns=t_ns, level=Level.INFO, message="m", data={"k": "v"})

    envelope = LogEnvelope.build("h1", entry)

    assert envelope.level == "INFO"
    assert envelope.timestamp == format_rfc3339_nano(t_ns)
    assert envelope.to_document() == {
        "Host": "h1",
        "Timestamp": "2023-11-14T22:13:20.123456789Z",
        "Message": "m",
        "Data": {"k": "v"},
        "Level": "INFO",
    }


def test_entry_from_record():
    record = logging.LogRecord("app", logging.ERROR, __file__, 10, "user %s", ("bob",), None)
    record.created = 1_700_000_000.25
    record.request_id = "r-1"

    entry = LogEntry.from_record(record)

    assert entry.level is Level.ERROR
    assert entry.message == "user bob"
    assert entry.data == {"request_id": "r-1"}
    assert entry.time_ns == 1_700_000_000_250_000_000


def test_explicit_error_field_is_kept():
    try:
        raise KeyError("x")
    except KeyError:
        import sys
        record = logging.LogRecord("app", logging.ERROR, __file__, 1, "m", (), sys.exc_info())
    record.error = "custom"

    assert LogEntry.from_record(record).data == {"error": "custom"}

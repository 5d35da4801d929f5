import logging

from library_patterns.catalog import Catalog
from library_patterns.notifications import Administrator, LoggingSink, NotificationSink


def test_administrator_prints_with_its_name(capsys):
    Administrator("Carlos").receive("New book registered: Dune")
    out = capsys.readouterr().out
    assert out == "Carlos received notification: New book registered: Dune\n"

def test_administrators_receive_in_registration_order(capsys):
    catalog = Catalog()
    catalog.register_sink(Administrator("Carlos"))
    catalog.register_sink(Administrator("Andrea"))
    catalog.broadcast("ping")
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Carlos received notification: ping",
        "Andrea received notification: ping",
    ]

def test_sinks_satisfy_protocol():
    assert isinstance(Administrator("Carlos"), NotificationSink)
    assert isinstance(LoggingSink(), NotificationSink)

def test_logging_sink_forwards_to_logger(caplog):
    sink = LoggingSink(name="library_patterns.test_events", level=logging.WARNING)
    with caplog.at_level(logging.WARNING, logger="library_patterns.test_events"):
        sink.receive("The book 'Dune' has been borrowed.")
    assert len(caplog.records) == 1
    record = caplog.records[0]
    assert record.name == "library_patterns.test_events"
    assert record.levelno == logging.WARNING
    assert record.getMessage() == "Catalog event: The book 'Dune' has been borrowed."

def test_administrator_name_is_printed_as_given(capsys):
    Administrator(" Carlos").receive("m")
    assert capsys.readouterr().out == " Carlos received notification: m\n"

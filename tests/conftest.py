import pytest

from entrylogger.core.entry import EntryMetadata, EntryRecord


def make_entry(
    date: str = "13-oct-20",
    time: str = "morning",
    tag: str = "fit",
    message: str = "aerobic (5/5)",
    ins: str | None = "1602579600000",
) -> EntryRecord:
    return EntryRecord(
        metadata=EntryMetadata(date=date, time=time, tag=tag, ins=ins),
        message=message,
    )


@pytest.fixture
def entry():
    return make_entry()

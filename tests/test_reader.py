# =============================================================================
# File Content Reader Tests
# =============================================================================

import asyncio

from spamscope.analysis import FileContentReader, FileReadError


def run_reads(reader, paths):
    """Start reads for all paths back to back, then wait for them."""
    loaded: list[str] = []
    errors: list[FileReadError] = []

    async def scenario():
        tasks = [
            reader.read_as_text(path, on_load=loaded.append, on_error=errors.append)
            for path in paths
        ]
        await asyncio.gather(*tasks)

    asyncio.run(scenario())
    return loaded, errors


def test_reads_text(temp_dir):
    path = temp_dir / "mail.txt"
    path.write_text("Hello there", encoding="utf-8")

    loaded, errors = run_reads(FileContentReader(), [path])

    assert loaded == ["Hello there"]
    assert errors == []


def test_strips_bom_and_replaces_invalid_bytes(temp_dir):
    path = temp_dir / "mail.eml"
    path.write_bytes(b"\xef\xbb\xbfSubject: hi\n\xff body")

    loaded, _ = run_reads(FileContentReader(), [path])

    assert loaded == ["Subject: hi\n� body"]


def test_missing_file_reports_error(temp_dir):
    loaded, errors = run_reads(FileContentReader(), [temp_dir / "missing.eml"])

    assert loaded == []
    assert len(errors) == 1
    assert isinstance(errors[0], FileReadError)


def test_newer_read_supersedes_pending_one(temp_dir):
    first = temp_dir / "first.txt"
    second = temp_dir / "second.txt"
    first.write_text("first", encoding="utf-8")
    second.write_text("second", encoding="utf-8")

    loaded, errors = run_reads(FileContentReader(), [first, second])

    assert loaded == ["second"]
    assert errors == []


def test_superseded_failure_is_ignored(temp_dir):
    good = temp_dir / "good.txt"
    good.write_text("good", encoding="utf-8")

    loaded, errors = run_reads(FileContentReader(), [temp_dir / "missing.txt", good])

    assert loaded == ["good"]
    assert errors == []


def test_is_reading_until_done(temp_dir):
    path = temp_dir / "mail.txt"
    path.write_text("x", encoding="utf-8")
    reader = FileContentReader()
    states = []

    async def scenario():
        task = reader.read_as_text(path, on_load=lambda _: None, on_error=lambda _: None)
        states.append(reader.is_reading)
        await task
        states.append(reader.is_reading)

    asyncio.run(scenario())
    assert states == [True, False]

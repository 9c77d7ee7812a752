from __future__ import annotations

import logging

import pytest

from lock_ir.models import FileRemote, Lockfile
from yarn_to_ir.conversion import LockfileConverter, process_records_to_lockfile
from yarn_to_ir.conversion.errors import MissingField, UnknownRemoteType
from yarn_to_ir.conversion.fields import record_from_mapping
from yarn_to_ir.exceptions import YarnLockConversionError, YarnLockError


@pytest.fixture
def good_records():
    return [
        record_from_mapping(
            "left-pad@^1.0.0, left-pad@^1.3.0",
            {
                "version": "1.3.0",
                "resolved": "https://registry.yarnpkg.com/left-pad/-/left-pad-1.3.0.tgz#5b8a",
            },
        ),
        record_from_mapping(
            "local@file:./packages/local",
            {"version": "0.0.0", "dependencies": {"left-pad": "^1.0.0"}},
        ),
    ]


@pytest.fixture
def bad_records():
    return [
        record_from_mapping("broken@^1.0.0", {"resolved": "https://host/a.tgz"}),
        record_from_mapping("odd@^2.0.0", {"version": "2.0.0", "resolved": ""}),
    ]


def test_converts_all_entries(good_records) -> None:
    lockfile = LockfileConverter(good_records).convert()

    assert isinstance(lockfile, Lockfile)
    assert len(lockfile) == 2
    assert [str(k) for k in lockfile.keys()] == [
        "left-pad@^1.0.0",
        "left-pad@^1.3.0",
        "local@file:./packages/local",
    ]
    left_pad = lockfile.get(good_records[0].keys[1])
    assert left_pad is not None
    assert left_pad.remote == FileRemote(
        url="https://registry.yarnpkg.com/left-pad/-/left-pad-1.3.0.tgz", hash="5b8a"
    )


def test_strict_mode_reports_every_failing_entry(good_records, bad_records) -> None:
    with pytest.raises(YarnLockConversionError) as excinfo:
        LockfileConverter(good_records + bad_records).convert()

    assert excinfo.value.failures == {
        "broken@^1.0.0": (MissingField(name="version"),),
        "odd@^2.0.0": (UnknownRemoteType(),),
    }
    assert "2 package(s) could not be converted" in str(excinfo.value)


def test_skip_invalid_keeps_good_entries(good_records, bad_records, caplog) -> None:
    with caplog.at_level(logging.WARNING):
        lockfile = process_records_to_lockfile(
            bad_records + good_records, skip_invalid=True
        )

    assert len(lockfile) == 2
    assert "Skipping broken@^1.0.0" in caplog.text
    assert "Skipping odd@^2.0.0" in caplog.text


def test_duplicate_alias_across_entries(good_records) -> None:
    duplicate = record_from_mapping("left-pad@^1.3.0", {"version": "1.3.0"})
    with pytest.raises(YarnLockError, match="Cannot assemble lockfile"):
        LockfileConverter(good_records + [duplicate]).convert()


def test_no_records_gives_empty_lockfile() -> None:
    assert len(LockfileConverter([]).convert()) == 0

import json
import logging

import pytest

from arnguard.checker import ResourceChecker
from arnguard.config import Settings
from arnguard.resource import new_resource


def test_checker_allows_match() -> None:
    checker = ResourceChecker()
    decision = checker.check("arn:aws:s3:::mybucket/*", "mybucket/a.txt")
    assert decision.allowed
    assert decision.reason == "Matched"


def test_checker_denies_mismatch() -> None:
    checker = ResourceChecker()
    decision = checker.check(new_resource("mybucket/*"), "other/a.txt")
    assert not decision.allowed
    assert decision.reason == "NotMatched"


def test_checker_fails_closed_on_invalid_resource() -> None:
    checker = ResourceChecker()
    assert checker.check("arn:aws:s3:::/mybucket", "mybucket").reason == "InvalidResource"
    assert checker.check("mybucket", "mybucket").reason == "InvalidResource"
    decision = checker.check(new_resource(""), "")
    assert not decision.allowed
    assert decision.reason == "InvalidResource"


def test_checker_condition_values() -> None:
    checker = ResourceChecker()
    decision = checker.check(
        "arn:aws:s3:::home/${aws:username}/*",
        "home/alice/notes.txt",
        {"aws:username": ["alice"]},
    )
    assert decision.allowed


def test_checker_with_conditions_disabled() -> None:
    checker = ResourceChecker(Settings.from_dict({"conditions": {"enabled": False}}))
    decision = checker.check(
        "arn:aws:s3:::home/${aws:username}/*",
        "home/alice/notes.txt",
        {"aws:username": ["alice"]},
    )
    assert not decision.allowed


def test_checker_bucket() -> None:
    checker = ResourceChecker()
    assert checker.check_bucket("arn:aws:s3:::example*a", "example22").allowed
    assert checker.check_bucket("arn:aws:s3:::example*a", "other").reason == "BucketMismatch"
    assert checker.check_bucket(new_resource(""), "other").reason == "InvalidResource"


def test_checker_audits_decisions(caplog: pytest.LogCaptureFixture) -> None:
    checker = ResourceChecker(Settings(version=7))
    with caplog.at_level(logging.INFO, logger="arnguard.audit"):
        checker.check("arn:aws:s3:::mybucket", "otherbucket")
    records = [json.loads(record.getMessage()) for record in caplog.records if record.name == "arnguard.audit"]
    assert records
    event = records[-1]
    assert event["action"] == "match"
    assert event["decision"] == "deny"
    assert event["reason"] == "NotMatched"
    assert event["resource"] == "arn:aws:s3:::mybucket"
    assert event["target"] == "otherbucket"
    assert event["config_version"] == 7

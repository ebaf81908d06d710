from datetime import datetime, timedelta

import pytest

from basic_token import ExpiredError, InvalidDurationError, NotExpiredError, NotValidError, SnapshotToken


def test_alice_scenario_with_frozen_clock(config, t0) -> None:
    token = SnapshotToken(config, reference_time=t0).issue({"sub": "alice"}, 1)

    at_30s = SnapshotToken(config, token, reference_time=t0 + timedelta(seconds=30))
    assert at_30s.is_valid() is True
    assert at_30s.has_expired() is False
    assert at_30s.claims() == {"sub": "alice"}

    frozen = SnapshotToken(config, token, reference_time=t0)
    assert frozen.has_expired() is False
    assert frozen.has_expired() is False
    assert frozen.reference_time == t0


def test_reference_time_defaults_to_construction_instant(config) -> None:
    before = datetime.now().astimezone()
    snapshot = SnapshotToken(config)
    after = datetime.now().astimezone()
    assert before <= snapshot.reference_time <= after


def test_naive_reference_time_is_read_as_utc(config, t0) -> None:
    snapshot = SnapshotToken(config, reference_time=t0.replace(tzinfo=None))
    assert snapshot.reference_time == t0


def test_issue_allows_zero_ttl_and_leaves_value_alone(config, t0) -> None:
    snapshot = SnapshotToken(config, "wrapped", reference_time=t0)
    token = snapshot.issue({"sub": "alice"}, 0)
    assert snapshot.value == "wrapped"

    snapshot.value = token
    assert snapshot.is_valid() is True
    assert snapshot.has_expired() is False
    assert snapshot.claims() == {"sub": "alice"}


def test_inspection_methods_enforce_order(config, t0) -> None:
    token = SnapshotToken(config, reference_time=t0).issue({"sub": "alice"}, 1)

    empty = SnapshotToken(config, reference_time=t0)
    assert empty.is_valid() is False
    with pytest.raises(NotValidError):
        empty.has_expired()

    live = SnapshotToken(config, token, reference_time=t0)
    with pytest.raises(NotExpiredError):
        live.expired_by_seconds()

    expired = SnapshotToken(config, token, reference_time=t0 + timedelta(seconds=90))
    assert expired.has_expired() is True
    assert expired.expired_by_seconds() == pytest.approx(30.0)
    with pytest.raises(ExpiredError):
        expired.claims()


@pytest.mark.parametrize("ttl", [float("nan"), float("inf"), 1e15])
def test_issue_rejects_out_of_range_ttl(config, t0, ttl) -> None:
    with pytest.raises(InvalidDurationError):
        SnapshotToken(config, reference_time=t0).issue({"sub": "alice"}, ttl)

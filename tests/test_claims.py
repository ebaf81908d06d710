import pytest

from basic_token.errors import DecodeError, InvalidClaimsError
from basic_token.token.claims import build_claim_set, parse_expiration, strip_reserved


def test_build_claim_set_copies_and_overrides_exp() -> None:
    caller = {"sub": "alice", "exp": "forged"}
    claim_set = build_claim_set(caller, 1714564860.25)
    assert claim_set == {"sub": "alice", "exp": "1714564860.25"}
    assert caller == {"sub": "alice", "exp": "forged"}


@pytest.mark.parametrize("claims", [{"sub": 1}, {1: "x"}, ["sub", "alice"]])
def test_build_claim_set_rejects_non_string_claims(claims) -> None:
    with pytest.raises(InvalidClaimsError):
        build_claim_set(claims, 0.0)


def test_expiration_round_trips_exactly() -> None:
    value = 1714564860.123456789
    assert parse_expiration(build_claim_set({}, value)) == value


@pytest.mark.parametrize("claim_set", [{}, {"exp": "soon"}, {"exp": "nan"}, {"exp": "inf"}])
def test_parse_expiration_rejects_bad_values(claim_set) -> None:
    with pytest.raises(DecodeError):
        parse_expiration(claim_set)


def test_strip_reserved_removes_exp_only() -> None:
    assert strip_reserved({"sub": "alice", "exp": "1.0"}) == {"sub": "alice"}

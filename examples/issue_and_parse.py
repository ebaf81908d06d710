"""Issue a token, then inspect it as a snapshot and through the live API."""

from __future__ import annotations

from datetime import timedelta

from basic_token import SnapshotToken, TokenConfig, issue, parse
from basic_token.utils.time import utc_now


def main() -> None:
    config = TokenConfig(secret_key="example-secret")
    token = issue({"sub": "alice", "role": "viewer"}, 1, config=config)
    print(f"token={token}")

    info = parse(token, config=config)
    print(f"live: valid={info.is_valid} expired={info.has_expired} claims={info.claims}")

    later = utc_now() + timedelta(seconds=90)
    info = parse(token, config=config, clock=lambda: later)
    print(f"live +90s: valid={info.is_valid} expired={info.has_expired} expired_by={info.expired_by_seconds:.1f}s")

    snapshot = SnapshotToken(config, token)
    print(f"snapshot: valid={snapshot.is_valid()} expired={snapshot.has_expired()} claims={snapshot.claims()}")


if __name__ == "__main__":
    main()

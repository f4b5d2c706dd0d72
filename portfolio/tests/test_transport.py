from __future__ import annotations

import pytest

from portfolio.interfaces.http.security import TokenTransport, bearer_from_header


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("Bearer abc.def.ghi", "abc.def.ghi"),
        ("bearer   abc", "abc"),
        ("Basic dXNlcjpwYXNz", None),
        ("Bearer", None),
        ("Bearer   ", None),
        ("", None),
        (None, None),
    ],
)
def test_bearer_from_header(value: str | None, expected: str | None) -> None:
    assert bearer_from_header(value) == expected


def test_cookie_wins_by_default() -> None:
    transport = TokenTransport()

    bearer = transport.resolve({"Authorization": "Bearer from-header"}, {"token": "from-cookie"})

    assert bearer == "from-cookie"


def test_header_wins_when_cookie_override_disabled() -> None:
    transport = TokenTransport(cookie_overrides_header=False)

    bearer = transport.resolve({"Authorization": "Bearer from-header"}, {"token": "from-cookie"})

    assert bearer == "from-header"


def test_falls_back_to_whichever_source_is_present() -> None:
    transport = TokenTransport(cookie_name="session")

    assert transport.resolve({"Authorization": "Bearer h"}, {}) == "h"
    assert transport.resolve({}, {"session": "c"}) == "c"
    assert transport.resolve({}, {"token": "c"}) is None
    assert transport.resolve({"Authorization": "Token x"}, {}) is None

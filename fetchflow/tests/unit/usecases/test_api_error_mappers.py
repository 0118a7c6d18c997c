import pytest

from fetchflow.domain.errors import (
    MSG_UNKNOWN,
    ClientError,
    ServerError,
    UnknownError,
)
from fetchflow.usecases.error_mapping import DefaultApiErrorMapper, UserApiErrorMapper


@pytest.mark.parametrize("code", [400, 401, 404, 418, 422, 499])
@pytest.mark.parametrize("body", [None, "", "<html>bad gateway</html>"])
def test_default_mapper_4xx_is_client_error_with_generated_message(code, body):
    err = DefaultApiErrorMapper().map_error(body, code)

    assert err == ClientError(f"{MSG_UNKNOWN} (code: {code})", code)
    assert str(code) in err.message


@pytest.mark.parametrize("code", [500, 502, 503, 599])
def test_default_mapper_5xx_is_server_error(code):
    err = DefaultApiErrorMapper().map_error(None, code)

    assert isinstance(err, ServerError)
    assert err.code == code


@pytest.mark.parametrize("code", [0, 200, 302, 399, 600, 700])
def test_default_mapper_other_codes_are_unknown(code):
    err = DefaultApiErrorMapper().map_error(None, code)

    assert isinstance(err, UnknownError)
    assert err.code == code


def test_default_mapper_uses_body_message():
    err = DefaultApiErrorMapper().map_error('{"message": "X"}', 418)

    assert err == ClientError("X", 418)


def test_default_mapper_body_message_on_server_error():
    err = DefaultApiErrorMapper().map_error('{"message": "db down", "code": 17}', 503)

    assert err == ServerError("db down", 503)


@pytest.mark.parametrize(
    "body",
    [
        "not json at all",
        "{",
        "[1, 2, 3]",
        "null",
        '"just a string"',
        '{"code": "abc"}',
        '{"message": "   "}',
        '{"other": "field"}',
    ],
)
def test_default_mapper_never_raises_on_bad_bodies(body):
    err = DefaultApiErrorMapper().map_error(body, 400)

    assert err == ClientError(f"{MSG_UNKNOWN} (code: 400)", 400)


def test_user_mapper_overrides_404_regardless_of_body():
    mapper = UserApiErrorMapper()

    assert mapper.map_error('{"message": "ignored"}', 404) == ClientError("User not found", 404)
    assert mapper.map_error(None, 404) == ClientError("User not found", 404)


def test_user_mapper_overrides_403():
    err = UserApiErrorMapper().map_error("garbage", 403)

    assert err == ClientError("You don't have permission to access this user", 403)


@pytest.mark.parametrize(
    "body, code",
    [
        (None, 400),
        ('{"message": "bad input"}', 422),
        ("oops", 500),
        ('{"message": "teapot"}', 418),
        (None, 200),
    ],
)
def test_user_mapper_delegates_other_codes_to_default(body, code):
    assert UserApiErrorMapper().map_error(body, code) == DefaultApiErrorMapper().map_error(
        body, code
    )


class _RecordingMapper:
    def __init__(self):
        self.calls = []

    def map_error(self, error_body, error_code):
        self.calls.append((error_body, error_code))
        return UnknownError("from fallback", error_code)


def test_user_mapper_composes_with_any_fallback():
    fallback = _RecordingMapper()
    mapper = UserApiErrorMapper(fallback=fallback)

    assert mapper.map_error("body", 409) == UnknownError("from fallback", 409)
    assert mapper.map_error("body", 404) == ClientError("User not found", 404)
    assert fallback.calls == [("body", 409)]


def test_user_mappers_stack():
    inner = UserApiErrorMapper(fallback=_RecordingMapper())
    outer = UserApiErrorMapper(fallback=inner)

    assert outer.map_error(None, 503) == UnknownError("from fallback", 503)


def test_default_mapper_accepts_numeric_message():
    err = DefaultApiErrorMapper().map_error('{"message": 42}', 400)

    assert err == ClientError("42", 400)

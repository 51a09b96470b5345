"""Tests for exception classes."""

import httpx

from rgs_api_sdk import RgsAPIError, RgsBadRequestError, RgsInternalError


class TestRgsAPIError:
    def test_str_with_status(self) -> None:
        err = RgsAPIError("Not found", status_code=404)
        assert str(err) == "[404] Not found"

    def test_str_without_status(self) -> None:
        err = RgsAPIError("Something went wrong")
        assert str(err) == "Something went wrong"

    def test_response_stored(self) -> None:
        response = httpx.Response(400, json={"error": "bad"})
        err = RgsAPIError("Error", status_code=400, response=response)
        assert err.response is response
        assert err.message == "Error"
        assert err.status_code == 400

    def test_response_defaults_to_none(self) -> None:
        err = RgsAPIError("Error")
        assert err.response is None
        assert err.cause is None

    def test_cause_from_chaining(self) -> None:
        original = httpx.ConnectError("refused")
        try:
            raise RgsInternalError("Critical error") from original
        except RgsInternalError as err:
            assert err.cause is original


class TestRgsBadRequestError:
    def test_is_rgs_api_error(self) -> None:
        err = RgsBadRequestError("Bad request", status_code=422)
        assert isinstance(err, RgsAPIError)
        assert str(err) == "[422] Bad request"


class TestRgsInternalError:
    def test_is_rgs_api_error(self) -> None:
        err = RgsInternalError("RGS service sent no response")
        assert isinstance(err, RgsAPIError)
        assert not isinstance(err, RgsBadRequestError)

import pytest

from darkcoin.rpc.envelope import CallResult, build_request
from darkcoin.utils.exceptions import ErrorCategory, RpcApplicationError


def test_build_request_copies_params() -> None:
    params = ("yAddr", 1)
    assert build_request("sendtoaddress", params, 9) == {"method": "sendtoaddress", "params": ["yAddr", 1], "id": 9}


def test_from_payload_ignores_unknown_members() -> None:
    r = CallResult.from_payload({"result": {"balance": 0, "extra": "kept"}, "id": 7, "jsonrpc": "1.0"})
    assert r.result == {"balance": 0, "extra": "kept"}
    assert r.error is None
    assert r.id == 7
    assert r.ok
    assert r.unwrap() == {"balance": 0, "extra": "kept"}


def test_error_is_authoritative_even_with_result() -> None:
    r = CallResult.from_payload({"result": "ignored", "error": {"code": -1, "message": "boom"}, "id": 1})
    assert not r.ok
    with pytest.raises(RpcApplicationError):
        r.unwrap()


def test_unwrap_exposes_daemon_code_and_message() -> None:
    r = CallResult(error={"code": -5, "message": "Invalid address"}, id=7)
    with pytest.raises(RpcApplicationError) as err:
        r.unwrap()
    assert err.value.rpc_code == -5
    assert err.value.rpc_message == "Invalid address"
    assert err.value.category == ErrorCategory.APPLICATION
    assert err.value.details["id"] == 7
    assert "Invalid address (code -5)" in str(err.value)


def test_unwrap_handles_opaque_error_values() -> None:
    with pytest.raises(RpcApplicationError) as err:
        CallResult(error="wallet locked", id=1).unwrap()
    assert err.value.rpc_code is None
    assert err.value.rpc_message == "wallet locked"


def test_null_result_is_ok() -> None:
    r = CallResult.from_payload({"result": None, "error": None, "id": 3})
    assert r.ok
    assert r.unwrap() is None
    assert r.to_dict() == {"result": None, "error": None, "id": 3}

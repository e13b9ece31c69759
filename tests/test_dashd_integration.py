"""
Live checks against a dashd instance.

Requires DASHD_URI, DASHD_USER and DASHD_PASSWORD. DO NOT point this at
mainnet: the wallet tests send funds.
"""

import os
import time

import pytest

from darkcoin.client import DarkcoinClient
from darkcoin.config.schema import DashdConfig

pytestmark = pytest.mark.requires_dashd

TX_ID_SIZE = 64


@pytest.fixture
def client() -> DarkcoinClient:
    return DarkcoinClient(
        DashdConfig(
            url=os.environ.get("DASHD_URI", "http://127.0.0.1:19998"),
            user=os.environ.get("DASHD_USER", ""),
            password=os.environ.get("DASHD_PASSWORD", ""),
        )
    )


@pytest.mark.asyncio
async def test_governance_info(client: DarkcoinClient) -> None:
    async with client:
        r = await client.get_governance_info()
    assert r.ok
    assert r.result["nextsuperblock"] > 0
    assert r.result["superblockcycle"] > 0


@pytest.mark.asyncio
async def test_wallet_info(client: DarkcoinClient) -> None:
    async with client:
        r = await client.get_wallet_info()
    assert r.result["walletversion"] > 0


@pytest.mark.asyncio
async def test_sign_and_verify_message(client: DarkcoinClient) -> None:
    msg = "test msg to be signed"
    async with client:
        address = (await client.get_new_address()).unwrap()
        signature = (await client.sign_message(address, msg)).unwrap()
        assert signature
        assert (await client.verify_message(address, signature, msg)).result is True
        assert (await client.verify_message(address, signature, msg.replace("d", "c"))).result is False


@pytest.mark.asyncio
async def test_send_to_fresh_address(client: DarkcoinClient) -> None:
    async with client:
        address = (await client.get_new_address()).unwrap()
        txid = (await client.send_to_address(address, 0.001, "test tx", "internal address", False, False, False)).unwrap()
    assert len(txid) == TX_ID_SIZE


@pytest.mark.asyncio
async def test_invalid_address_is_an_application_error(client: DarkcoinClient) -> None:
    async with client:
        r = await client.send_to_address("not-an-address", 0.001)
    assert not r.ok
    assert r.result is None
    assert r.error["code"] == -5


@pytest.mark.asyncio
async def test_dumped_wallet_imports_cleanly(client: DarkcoinClient) -> None:
    out_file = f"/tmp/darkcoin-tests-{int(time.time())}"
    async with client:
        assert (await client.dump_wallet(out_file)).ok
        assert (await client.import_wallet(out_file)).ok

"""Unit tests for the checkout load generator's outcome tally."""

import asyncio

import httpx

from scripts.load_test import run, send_one


def _send(handler) -> str:
    async def go():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            outcome, _ = await send_one(client, "http://checkout.test", "usd", 100)
            return outcome

    return asyncio.run(go())


def test_outcome_read_from_body_status():
    """A 200 carrying an error body counts as an error, not a success."""

    assert _send(lambda request: httpx.Response(200, json={"status": "error", "message": "x"})) == "error"


def test_non_json_body_does_not_abort_run():
    """A 2xx with a non-JSON body is tallied instead of raising."""

    assert _send(lambda request: httpx.Response(200, text="<html>oops</html>")) == "bad_body"


def test_non_2xx_tallied_by_code():
    """Deployments mapping rejections to 502 show up by status code."""

    assert _send(lambda request: httpx.Response(502, json={"status": "error"})) == "http_502"


def test_empty_run_prints_without_dividing(capsys):
    """`--total 0` exits cleanly."""

    asyncio.run(run(0, 5, "http://checkout.test", "usd", 100))

    assert capsys.readouterr().out.strip() == "total=0"

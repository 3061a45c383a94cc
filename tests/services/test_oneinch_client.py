from decimal import Decimal

import pytest
from aiohttp import ClientResponseError

from services.oneinch_client import OneInchClient, QuoteResponseError


class FakeResponse:
    def __init__(self, payload, status=200):
        self._payload = payload
        self.status = status

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False

    def raise_for_status(self):
        if self.status >= 400:
            raise ClientResponseError(request_info=None, history=(), status=self.status)
        return None

    async def json(self):
        return self._payload


class FakeSession:
    def __init__(self, responses):
        self._responses = list(responses)
        self.requests = []

    def get(self, url, params=None):
        if not self._responses:
            raise AssertionError("No more fake responses configured")
        self.requests.append((url, params))
        return self._responses.pop(0)


def test_quote_params_use_plain_base_unit_amount():
    params = OneInchClient.quote_params('ETH', 'DAI', Decimal('1E+17'))

    assert params == {
        'fromTokenSymbol': 'ETH',
        'toTokenSymbol': 'DAI',
        'amount': '100000000000000000',
        'disabledExchangesList': 'Bancor,AirSwap,PMM',
    }


def test_parse_quote_keeps_full_precision():
    amount = OneInchClient.parse_quote({'toTokenAmount': '123456789012345678901234567890'})

    assert amount == Decimal('123456789012345678901234567890')


def test_parse_quote_rejects_missing_amount():
    with pytest.raises(QuoteResponseError):
        OneInchClient.parse_quote({'fromTokenAmount': '1'})


@pytest.mark.parametrize('bad', ['lots', 'NaN', 'sNaN', 'Infinity', '-Infinity', '1.5', '-2000'])
def test_parse_quote_rejects_garbage_amount(bad):
    with pytest.raises(QuoteResponseError):
        OneInchClient.parse_quote({'toTokenAmount': bad})


def test_parse_quote_accepts_integral_numbers():
    assert OneInchClient.parse_quote({'toTokenAmount': 2000}) == Decimal(2000)
    assert OneInchClient.parse_quote({'toTokenAmount': '2000.0'}) == Decimal(2000)


@pytest.mark.asyncio
async def test_fetch_sell_quotes_sells_taker_for_maker():
    session = FakeSession([FakeResponse({'toTokenAmount': '2000'})])
    client = OneInchClient(session, quote_url='http://mock-1inch/quote')

    sources = await client.fetch_sell_quotes('DAI', 'ETH', Decimal(10) ** 18)

    assert sources == {'1inch': Decimal(2000)}
    url, params = session.requests[0]
    assert url == 'http://mock-1inch/quote'
    assert params['fromTokenSymbol'] == 'ETH'
    assert params['toTokenSymbol'] == 'DAI'
    assert params['amount'] == '1000000000000000000'


@pytest.mark.asyncio
async def test_fetch_quote_propagates_http_errors():
    session = FakeSession([FakeResponse({}, status=500)])
    client = OneInchClient(session, quote_url='http://mock-1inch/quote')

    with pytest.raises(ClientResponseError):
        await client.fetch_quote('ETH', 'DAI', Decimal(1))

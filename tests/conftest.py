"""
Pytest configuration and shared fixtures.
"""
import io
import json
import pytest
from unittest.mock import Mock, patch

from src.mtg_card_lookup.models.card import Card
from src.mtg_card_lookup.events import LookupEventEmitter
from src.mtg_card_lookup.presenter import CardPresenter, make_console
from src.mtg_card_lookup.tools.cards_api import CardsAPI


# Make sure no test ever reaches the real API
@pytest.fixture(autouse=True)
def block_network():
    """Fail loudly if a test issues an unmocked HTTP request"""
    with patch('requests.Session.send', side_effect=AssertionError("unmocked HTTP request")) as mock_send:
        yield mock_send


# ==================== CARD FIXTURES ====================

@pytest.fixture
def sample_card_data():
    """Sample card data for testing - matches magicthegathering.io API format."""
    return {
        "name": "Opt",
        "manaCost": "{U}",
        "cmc": 1,
        "colors": ["Blue"],
        "type": "Instant",
        "types": ["Instant"],
        "rarity": "Common",
        "set": "INV",
        "setName": "Invasion",
        "text": "Scry 1.\nDraw a card.",
        "flavor": "The future is a river.\nI am its current.",
        "artist": "John Avon",
        "number": "64",
        "layout": "normal",
        "multiverseid": "22988",
        "id": "dd2cd2e4-7c4b-5d3e-8a3b-5b8f6e1b2f01"
    }


@pytest.fixture
def sample_card_data_no_flavor(sample_card_data):
    """Card data without the optional flavor field."""
    data = sample_card_data.copy()
    del data["flavor"]
    data["id"] = "0f1e2d3c-4b5a-6978-8a9b-0c1d2e3f4a5b"
    data["setName"] = "Ixalan"
    return data


@pytest.fixture
def sample_card(sample_card_data):
    """Sample Card model instance."""
    return Card.model_validate(sample_card_data)


@pytest.fixture
def sample_card_no_flavor(sample_card_data_no_flavor):
    return Card.model_validate(sample_card_data_no_flavor)


@pytest.fixture
def opt_response_body():
    """Response body used for the end-to-end Opt lookup."""
    return json.dumps({
        "cards": [{
            "name": "Opt",
            "manaCost": "{U}",
            "type": "Instant",
            "rarity": "Common",
            "setName": "Ice Age",
            "flavor": None,
            "text": "Draw...",
            "artist": "Mark Poole",
            "number": "1",
            "id": "abc123"
        }]
    }).encode()


@pytest.fixture
def cards_payload(sample_card_data, sample_card_data_no_flavor):
    """Encoded /cards payload with two cards."""
    return json.dumps({"cards": [sample_card_data, sample_card_data_no_flavor]}).encode()


# ==================== CONSOLE FIXTURES ====================

@pytest.fixture
def console():
    """Console writing to an in-memory buffer."""
    return make_console(file=io.StringIO(), width=200)


@pytest.fixture
def presenter(console):
    return CardPresenter(console)


@pytest.fixture
def output(console):
    """Callable returning everything printed so far."""
    return lambda: console.file.getvalue()


# ==================== HTTP FIXTURES ====================

@pytest.fixture
def make_response():
    """Factory for mock requests responses."""
    def _make(status_code=200, content=b'{"cards": []}'):
        response = Mock()
        response.status_code = status_code
        response.content = content
        return response
    return _make


@pytest.fixture
def cards_api():
    return CardsAPI(base_url="https://api.magicthegathering.io")


# ==================== EVENT FIXTURES ====================

@pytest.fixture
def mock_event_emitter():
    """Mock event emitter for testing."""
    emitter = Mock(spec=LookupEventEmitter)
    emitter.emit = Mock()
    emitter.on = Mock()
    emitter.off = Mock()
    emitter.clear_listeners = Mock()
    return emitter


@pytest.fixture
def real_event_emitter():
    """Real event emitter instance for testing."""
    return LookupEventEmitter()


# ==================== CONFIG FIXTURES ====================

@pytest.fixture
def reset_config_module():
    """Reset config module state between tests."""
    import src.mtg_card_lookup.config as config
    original_values = {}
    for attr in dir(config):
        if not attr.startswith('_') and attr.isupper():
            original_values[attr] = getattr(config, attr)

    yield

    for attr, value in original_values.items():
        setattr(config, attr, value)

"""
Pytest configuration and shared fixtures.
"""
import pytest
import os
from unittest.mock import Mock, patch

from scryfall_lookup.models.card import Card


# ==================== CARD FIXTURES ====================

@pytest.fixture
def sample_image_uris():
    """Complete image URI set as Scryfall returns it."""
    return {
        "small": "https://cards.scryfall.io/small/front/b/d/bd8fa327.jpg",
        "normal": "https://cards.scryfall.io/normal/front/b/d/bd8fa327.jpg",
        "large": "https://cards.scryfall.io/large/front/b/d/bd8fa327.jpg",
        "png": "https://cards.scryfall.io/png/front/b/d/bd8fa327.png",
        "art_crop": "https://cards.scryfall.io/art_crop/front/b/d/bd8fa327.jpg",
        "border_crop": "https://cards.scryfall.io/border_crop/front/b/d/bd8fa327.jpg"
    }


@pytest.fixture
def sample_card_data(sample_image_uris):
    """Sample MTG card data for testing - matches Scryfall API format."""
    return {
        "object": "card",
        "id": "bd8fa327-dd41-4737-8f19-2cf5eb1f7cdd",
        "name": "Black Lotus",
        "mana_cost": "{0}",
        "cmc": 0.0,
        "type_line": "Artifact",
        "oracle_text": "{T}, Sacrifice Black Lotus: Add three mana of any one color.",
        "layout": "normal",
        "set": "lea",
        "set_name": "Limited Edition Alpha",
        "rarity": "rare",
        "scryfall_uri": "https://scryfall.com/card/lea/232/black-lotus",
        "image_uris": sample_image_uris
    }


@pytest.fixture
def sample_dfc_data(sample_image_uris):
    """Double-faced card: images live on the faces only."""
    back_uris = {key: value.replace("/front/", "/back/") for key, value in sample_image_uris.items()}
    return {
        "object": "card",
        "id": "0a8b9d37-e89c-44ad-bd1b-51cb06ec3e0b",
        "name": "Delver of Secrets // Insectile Aberration",
        "type_line": "Creature — Human Wizard // Creature — Human Insect",
        "layout": "transform",
        "set_name": "Innistrad",
        "rarity": "common",
        "scryfall_uri": "https://scryfall.com/card/isd/51/delver-of-secrets-insectile-aberration",
        "card_faces": [
            {
                "name": "Delver of Secrets",
                "mana_cost": "{U}",
                "type_line": "Creature — Human Wizard",
                "oracle_text": "At the beginning of your upkeep, look at the top card of your library.",
                "image_uris": sample_image_uris
            },
            {
                "name": "Insectile Aberration",
                "mana_cost": "",
                "type_line": "Creature — Human Insect",
                "oracle_text": "Flying",
                "image_uris": back_uris
            }
        ]
    }


@pytest.fixture
def imageless_card_data():
    """A catalog entry with no artwork at all."""
    return {
        "object": "card",
        "id": "5e3f2c43-7e3b-4d5e-a2ee-0f5e2b1e1a11",
        "name": "Ancestral Recall Checklist",
        "type_line": "Card",
        "layout": "token",
        "scryfall_uri": "https://scryfall.com/card/tmp/1/checklist"
    }


@pytest.fixture
def reversible_card_data(sample_image_uris):
    """Reversible card: no top-level type line, each face has its own."""
    return {
        "object": "card",
        "id": "3e2a8c1f-9b4d-4c2e-8a7f-6d5b4c3a2e1f",
        "name": "Zndrsplt, Eye of Wisdom // Zndrsplt, Eye of Wisdom",
        "layout": "reversible_card",
        "rarity": "rare",
        "scryfall_uri": "https://scryfall.com/card/sld/379/zndrsplt-eye-of-wisdom",
        "card_faces": [
            {
                "name": "Zndrsplt, Eye of Wisdom",
                "type_line": "Legendary Creature — Homunculus",
                "image_uris": sample_image_uris
            },
            {
                "name": "Zndrsplt, Eye of Wisdom",
                "type_line": "Legendary Creature — Homunculus Advisor",
                "image_uris": sample_image_uris
            }
        ]
    }


@pytest.fixture
def sample_card(sample_card_data):
    """Sample Card model instance."""
    return Card.from_scryfall(sample_card_data)


# ==================== API MOCK FIXTURES ====================

@pytest.fixture
def mock_scryfall_response(sample_card_data, sample_dfc_data, imageless_card_data):
    """Single-page search response with three results."""
    return {
        "object": "list",
        "total_cards": 3,
        "has_more": False,
        "data": [sample_card_data, sample_dfc_data, imageless_card_data]
    }


@pytest.fixture
def mock_scryfall_paginated_response(sample_card_data):
    """Mock paginated Scryfall API response."""
    return {
        "object": "list",
        "total_cards": 175,
        "has_more": True,
        "next_page": "https://api.scryfall.com/cards/search?dir=asc&order=name&page=2&q=name%3A%2Fdrag%2F",
        "data": [sample_card_data]
    }


@pytest.fixture
def not_found_error_body():
    """Scryfall error object for an unknown card."""
    return {
        "object": "error",
        "code": "not_found",
        "status": 404,
        "details": "Card not found."
    }


@pytest.fixture
def make_response():
    """Factory for mock HTTP responses."""
    def _make(status_code=200, body=None, json_error=None):
        response = Mock()
        response.status_code = status_code
        if json_error is not None:
            response.json.side_effect = json_error
        else:
            response.json.return_value = body
        return response
    return _make


# ==================== CONFIGURATION FIXTURES ====================

@pytest.fixture
def mock_environment_variables():
    """Mock environment variables for testing."""
    env_vars = {
        "SCRYFALL_BASE_URL": "https://scryfall.test/",
        "SCRYFALL_REQUEST_TIMEOUT": "2.5",
        "SCRYFALL_RANDOM_MAX_ATTEMPTS": "4",
        "LOG_LEVEL": "DEBUG"
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def reset_config_module():
    """Reset config module state between tests."""
    import scryfall_lookup.config as config
    original_values = {}
    for attr in dir(config):
        if not attr.startswith('_') and attr.isupper():
            original_values[attr] = getattr(config, attr)

    yield

    for attr, value in original_values.items():
        setattr(config, attr, value)

import requests
from typing import Dict, Any, Optional, Type, TypeVar
from urllib.parse import quote, urlencode
from pydantic import BaseModel, ValidationError
from ..models.card import Artwork, Card
from ..models.search import SearchResult
from ..errors import (
    DEFAULT_ERROR_MESSAGE,
    MalformedResponse,
    NoDisplayableImage,
    UpstreamRequestFailed,
)
from ..log import get_logger
from .. import config

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def build_named_url(base_url: str, query: str) -> str:
    """URL for a fuzzy name lookup"""
    return f"{base_url}/cards/named?fuzzy={quote(query, safe='')}"


def build_search_url(base_url: str, query: str, page: int = 1) -> str:
    """
    URL for a case-insensitive name-contains search ordered by name.

    Page 1 is requested without a page parameter so the first page always
    maps to the same URL.
    """
    params = [("q", f"name:/{query}/"), ("order", "name"), ("dir", "asc")]
    if page > 1:
        params.append(("page", str(page)))
    return f"{base_url}/cards/search?{urlencode(params, quote_via=quote, safe='')}"


def build_random_url(base_url: str) -> str:
    return f"{base_url}/cards/random"


def build_card_url(base_url: str, card_id: str) -> str:
    return f"{base_url}/cards/{quote(card_id, safe='')}"


def interpret_response(response: requests.Response, fallback_message: str = DEFAULT_ERROR_MESSAGE) -> Dict[str, Any]:
    """
    Turn a raw HTTP response into a JSON object or a ServiceError.

    Args:
        response: Response returned by the HTTP session
        fallback_message: Message used when a failure body carries no details

    Returns:
        The decoded JSON object of a successful response

    Raises:
        UpstreamRequestFailed: For non-2xx responses
        MalformedResponse: For 2xx responses that are not a JSON object
    """
    status = response.status_code
    if not 200 <= status < 300:
        try:
            body = response.json()
        except ValueError:
            body = None
        if not isinstance(body, dict):
            body = {}
        logger.warning("Scryfall API error ({}): {}", status, body or "<no body>")

        details = body.get("details")
        body_status = body.get("status")
        code = body.get("code")
        raise UpstreamRequestFailed(
            details=details if isinstance(details, str) and details else fallback_message,
            status=body_status if isinstance(body_status, int) and not isinstance(body_status, bool) else status,
            code=code if isinstance(code, str) else None,
        )

    try:
        payload = response.json()
    except ValueError as e:
        raise MalformedResponse(f"Response body is not valid JSON: {e}", status=status) from e
    if not isinstance(payload, dict):
        raise MalformedResponse("Response body is not a JSON object", status=status)
    return payload


def require_artwork(card: Card) -> Artwork:
    """Return the card's artwork or raise NoDisplayableImage"""
    artwork = card.artwork
    if artwork is None:
        raise NoDisplayableImage()
    return artwork


class ScryfallAPI:
    """
    Client for the four Scryfall card lookups.

    Each call issues one GET and returns a validated model or raises a
    ServiceError. The session is the only thing kept between calls. A
    session passed in is used as is: its User-Agent and Accept headers are
    overwritten in place.
    """

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None, session: Optional[requests.Session] = None):
        self.base_url = (base_url or config.SCRYFALL_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else config.REQUEST_TIMEOUT_SECONDS
        self.session = session or requests.Session()
        self.session.headers.update({
            'User-Agent': config.SCRYFALL_USER_AGENT,
            'Accept': 'application/json'
        })

    def _fetch(self, model: Type[ModelT], url: str, fallback_message: str) -> ModelT:
        logger.debug("GET {}", url)
        response = self.session.get(url, timeout=self.timeout)
        payload = interpret_response(response, fallback_message)
        try:
            return model.from_scryfall(payload)
        except ValidationError as e:
            raise MalformedResponse(
                f"Unexpected {model.__name__} payload: {e.error_count()} validation error(s)",
                status=response.status_code,
            ) from e

    def search_card(self, query: str) -> Card:
        """
        Fuzzy lookup of a single card by name.

        Args:
            query: Card name, minor misspellings are tolerated upstream

        Returns:
            The best matching Card, guaranteed to have artwork
        """
        logger.debug("Searching for card: {}", query)
        card = self._fetch(Card, build_named_url(self.base_url, query), "Failed to fetch card data")
        require_artwork(card)
        return card

    def search_cards(self, query: str, page: int = 1) -> SearchResult:
        """
        Search for cards whose name contains the query.

        Args:
            query: Text matched case-insensitively against card names
            page: 1-based page number

        Returns:
            One page of results in name order. Entries without artwork are kept.
        """
        if isinstance(page, bool) or not isinstance(page, int) or page < 1:
            raise ValueError(f"page must be an integer >= 1, got {page!r}")

        logger.debug("Searching for cards with query: {}, page: {}", query, page)
        return self._fetch(SearchResult, build_search_url(self.base_url, query, page), "Failed to fetch search results")

    def get_random_card(self, max_attempts: Optional[int] = None) -> Card:
        """
        Get a random card that has artwork.

        Image-less picks are discarded and a fresh request is made. With no
        cap this loops until a card with artwork arrives or a request fails,
        so callers needing bounded latency should pass max_attempts or wrap
        the call in their own timeout.

        Args:
            max_attempts: Stop after this many image-less picks, defaults to
                RANDOM_CARD_MAX_ATTEMPTS (unbounded when None)

        Raises:
            NoDisplayableImage: Only when max_attempts is exhausted
        """
        if max_attempts is None:
            max_attempts = config.RANDOM_CARD_MAX_ATTEMPTS
        if max_attempts is not None and max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {max_attempts!r}")

        attempt = 0
        while True:
            attempt += 1
            logger.debug("Fetching random card (attempt {})", attempt)
            card = self._fetch(Card, build_random_url(self.base_url), "Failed to fetch random card")
            try:
                require_artwork(card)
            except NoDisplayableImage:
                if max_attempts is not None and attempt >= max_attempts:
                    raise
                logger.info("Random card {} has no image data, retrying", card.name)
                continue
            return card

    def get_card(self, card_id: str) -> Card:
        """
        Get a specific card by its Scryfall ID.

        Raises:
            UpstreamRequestFailed: With the upstream not_found payload for unknown IDs
            NoDisplayableImage: When the card has no artwork
        """
        logger.debug("Fetching card with ID: {}", card_id)
        card = self._fetch(Card, build_card_url(self.base_url, card_id), "Card not found")
        require_artwork(card)
        return card

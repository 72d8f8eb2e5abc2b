"""Google Knowledge Graph Search API client.

Resolves a keyword (or a set of entity ids such as "/m/065qh") to Knowledge
Graph entities. The returned ids can be fed to a trends tool as topic-search
terms, which cover every language and spelling of an entity instead of a
single literal keyword.
"""

from collections.abc import Sequence
from typing import Any
from urllib.parse import quote, urlencode

import httpx

from kgraph_search.config import settings
from kgraph_search.consts import (
    DEFAULT_LIMIT,
    KEYWORD_TRUNCATED,
    KG_ID_PREFIX,
    LIMIT_CLAMPED_HIGH,
    LIMIT_CLAMPED_LOW,
    MAX_LIMIT,
    MIN_LIMIT,
)
from kgraph_search.exceptions import ConflictingParametersError, InvalidParameterError
from kgraph_search.tools._http_utils import async_fetch_json, fetch_json
from kgraph_search.types import CallParameters, EntityRecord, KGraphResult, SearchRequest
from kgraph_search.utils.logging import log_with_context, redact_url, setup_logger

logger = setup_logger(__name__)

StrOrSeq = str | Sequence[str] | None


def _as_list(value: StrOrSeq) -> list[str]:
    """Normalize a single string or a sequence of strings, dropping empty entries."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value else []
    return [str(v) for v in value if v]


def build_request(
    keyword: StrOrSeq = "",
    token: str | None = None,
    ids: StrOrSeq = (),
    hl: str = "",
    types: StrOrSeq = (),
    prefix: bool = False,
    limit: int = DEFAULT_LIMIT,
) -> tuple[SearchRequest, list[str]]:
    """Validate and normalize call parameters.

    Nothing here touches the network. Adjustments that do not abort the call
    (clamped limit, extra keywords) are returned as warnings.

    Returns:
        The normalized SearchRequest and the list of warnings raised

    Raises:
        ConflictingParametersError: If both keyword and ids are given
        InvalidParameterError: If prefix is not a bool, limit is not an int,
            or no API key is available
    """
    warnings: list[str] = []

    if isinstance(limit, bool) or not isinstance(limit, int):
        raise InvalidParameterError("limit", f"must be an integer, got {type(limit).__name__}")
    if limit > MAX_LIMIT:
        warnings.append(LIMIT_CLAMPED_HIGH)
        limit = MAX_LIMIT
    elif limit < MIN_LIMIT:
        warnings.append(LIMIT_CLAMPED_LOW)
        limit = MIN_LIMIT

    keywords = [keyword] if isinstance(keyword, str) else list(keyword or [])
    if len(keywords) > 1:
        warnings.append(KEYWORD_TRUNCATED)
    query = keywords[0] if keywords else ""
    if query is None:
        query = ""
    elif not isinstance(query, str):
        raise InvalidParameterError("keyword", f"must be a string, got {type(query).__name__}")

    id_list = _as_list(ids)
    if query and id_list:
        raise ConflictingParametersError()

    if not isinstance(prefix, bool):
        raise InvalidParameterError("prefix", "needs to be a boolean")

    token = token or settings.google_api_key
    if not token:
        raise InvalidParameterError(
            "token", "Google API key missing. Pass token= or set GOOGLE_API_KEY in .env file"
        )

    for message in warnings:
        log_with_context(logger, "warning", message, keyword=query, limit=limit)

    request = SearchRequest(
        keyword=query,
        token=token,
        ids=id_list,
        language=hl or settings.default_language,
        types=_as_list(types),
        prefix=prefix,
        limit=limit,
    )
    return request, warnings


def build_request_url(request: SearchRequest, base_url: str | None = None) -> str:
    """Build the GET URL for a normalized request.

    `ids` and `types` repeat once per value and are left out entirely when
    empty, since the API rejects an empty `ids=` or `types=`. Every value is
    percent-encoded on its own, so the "/" in "/m/065qh" becomes "%2F".
    The assembled URL then goes through httpx normalization, which encodes
    anything still unsafe but leaves existing escapes alone.
    """
    params: list[tuple[str, str]] = [("query", request.keyword), ("key", request.token)]
    params.extend(("ids", entity_id) for entity_id in request.ids)
    params.append(("languages", request.language))
    params.extend(("types", type_) for type_ in request.types)
    params.extend(
        [
            ("prefix", str(request.prefix).lower()),
            ("limit", str(request.limit)),
            ("indent", "false"),
        ]
    )

    query_string = urlencode(params, safe="", quote_via=quote)
    return str(httpx.URL(f"{base_url or settings.kg_search_url}?{query_string}"))


def _parse_entity(item: dict[str, Any]) -> EntityRecord:
    result = item.get("result") or {}

    raw_id = result.get("@id")
    entity_id = raw_id.removeprefix(KG_ID_PREFIX) if isinstance(raw_id, str) else None

    raw_types = result.get("@type")
    if isinstance(raw_types, str):
        entity_types = [raw_types]
    else:
        entity_types = list(raw_types or [])

    # Only the article body is kept; url and license are dropped
    detailed = result.get("detailedDescription")
    article_body = detailed.get("articleBody") if isinstance(detailed, dict) else None

    return EntityRecord(
        id=entity_id,
        name=result.get("name"),
        types=entity_types,
        description=result.get("description"),
        detailed_description=article_body,
        score=item.get("resultScore"),
    )


def parse_entities(payload: dict[str, Any]) -> list[EntityRecord]:
    """Flatten `itemListElement` into EntityRecords, keeping API order.

    Args:
        payload: Decoded JSON body of a 200 response

    Returns:
        One EntityRecord per item; empty if the API matched nothing
    """
    items = payload.get("itemListElement") or []
    entities = [_parse_entity(item) for item in items]

    logger.debug(f"Parsed {len(entities)} entities out of {len(items)} items")

    return entities


def _prepare(
    keyword: StrOrSeq,
    token: str | None,
    ids: StrOrSeq,
    hl: str,
    types: StrOrSeq,
    prefix: bool,
    limit: int,
) -> tuple[SearchRequest, list[str], str]:
    request, warnings = build_request(keyword, token, ids, hl, types, prefix, limit)
    url = build_request_url(request)

    logger.info(
        "Fetching entities from Knowledge Graph API",
        extra={"keyword": request.keyword, "ids": request.ids, "url": redact_url(url)},
    )
    return request, warnings, url


def _to_result(
    call: CallParameters,
    request: SearchRequest,
    warnings: list[str],
    url: str,
    payload: dict[str, Any],
) -> KGraphResult:
    entities = parse_entities(payload)

    logger.info(
        f"Successfully fetched {len(entities)} entities from Knowledge Graph API",
        extra={"keyword": request.keyword},
    )

    return KGraphResult(
        call=call, request=request, request_url=url, entities=entities, warnings=warnings
    )


def kgraph(
    keyword: StrOrSeq = "",
    token: str | None = None,
    ids: StrOrSeq = (),
    hl: str = "",
    types: StrOrSeq = (),
    prefix: bool = False,
    limit: int = DEFAULT_LIMIT,
    timeout: float | None = None,
) -> KGraphResult:
    """Obtain Google Knowledge Graph entities for a keyword or a set of ids.

    Args:
        keyword: Search keyword. Only one keyword is allowed per call; if a
            sequence is given, the first is used and a warning is recorded
        token: Google API key. If None, uses settings.google_api_key
        ids: Entity id(s) to look up, in the form "/m/062s4"
        hl: ISO 639 language code (e.g. "en" or "fr")
        types: schema.org type(s) restricting the returned entities, e.g.
            "Person". Entities matching any of the types are returned
        prefix: Allow prefix matching against names and aliases, so "Jung"
            also matches "Jungle" and "Jung-ho Kang"
        limit: Maximum number of entities (default 10, maximum 20)
        timeout: Request timeout in seconds. If None, uses settings.search_timeout

    Returns:
        KGraphResult with entities in the API's descending relevance order

    Raises:
        ConflictingParametersError: If both keyword and ids are given
        InvalidParameterError: If a parameter has the wrong type or no key is set
        ApiError: If the API answers with a non-200 status. Unsupported
            `types` (e.g. "Vehicle") commonly produce a 400 here
        httpx.HTTPError: For transport errors
    """
    request, warnings, url = _prepare(keyword, token, ids, hl, types, prefix, limit)
    call = CallParameters(
        keyword=keyword,
        token=token,
        ids=ids,
        hl=hl,
        types=types,
        prefix=prefix,
        limit=limit,
        timeout=timeout,
    )
    payload = fetch_json(url, timeout)
    return _to_result(call, request, warnings, url, payload)


async def async_kgraph(
    keyword: StrOrSeq = "",
    token: str | None = None,
    ids: StrOrSeq = (),
    hl: str = "",
    types: StrOrSeq = (),
    prefix: bool = False,
    limit: int = DEFAULT_LIMIT,
    timeout: float | None = None,
) -> KGraphResult:
    """Awaitable variant of `kgraph` with identical validation and parsing."""
    request, warnings, url = _prepare(keyword, token, ids, hl, types, prefix, limit)
    call = CallParameters(
        keyword=keyword,
        token=token,
        ids=ids,
        hl=hl,
        types=types,
        prefix=prefix,
        limit=limit,
        timeout=timeout,
    )
    payload = await async_fetch_json(url, timeout)
    return _to_result(call, request, warnings, url, payload)


class KnowledgeGraphClient:
    """Holds an API key and language so repeated calls stay short."""

    def __init__(
        self,
        api_key: str | None = None,
        language: str = "",
        timeout: float | None = None,
    ):
        """Initialize Knowledge Graph client.

        Args:
            api_key: Google API key. If None, uses settings.google_api_key
            language: ISO 639 language code applied to every call
            timeout: Request timeout in seconds. If None, uses settings.search_timeout
        """
        self.api_key = api_key
        self.language = language
        self.timeout = timeout

    def search(
        self,
        keyword: StrOrSeq,
        types: StrOrSeq = (),
        prefix: bool = False,
        limit: int = DEFAULT_LIMIT,
    ) -> KGraphResult:
        """Search entities by keyword."""
        return kgraph(
            keyword=keyword,
            token=self.api_key,
            hl=self.language,
            types=types,
            prefix=prefix,
            limit=limit,
            timeout=self.timeout,
        )

    def lookup(self, ids: StrOrSeq, limit: int = DEFAULT_LIMIT) -> KGraphResult:
        """Fetch entities by id, e.g. "/m/065qh"."""
        return kgraph(
            ids=ids,
            token=self.api_key,
            hl=self.language,
            limit=limit,
            timeout=self.timeout,
        )

"""Catalog and library search."""

from collections.abc import Iterable
from enum import Enum
from typing import TYPE_CHECKING, TypeVar

from am_api.exceptions import InvalidResourceTypeError
from am_api.models.common import AppleMusicModel
from am_api.models.search import (
    CatalogSearchResults,
    CatalogSearchSuggestion,
    CatalogSearchSuggestions,
    CatalogSearchType,
    LibrarySearchResults,
    LibrarySearchType,
    SearchHints,
    SuggestionKind,
)
from am_api.request.builder import RequestBuilder
from am_api.request.context import bind_context
from am_api.request.parsing import parse_as

if TYPE_CHECKING:
    from am_api.client import ApiClient

E = TypeVar("E", bound=Enum)

DEFAULT_SUGGESTION_LIMIT = 5


def format_term(term: str) -> str:
    """Spaces in search terms are sent as '+'."""
    if not term or not term.strip():
        raise ValueError("Search term must not be empty")
    return term.replace(" ", "+")


def _join_members(enum_type: type[E], values: Iterable[E | str]) -> str:
    if isinstance(values, str):
        values = [values]

    members = []
    for value in values:
        try:
            members.append(enum_type(value).value)
        except ValueError as e:
            raise InvalidResourceTypeError(
                f"{value!r} is not a valid {enum_type.__name__}"
            ) from e

    if not members:
        raise InvalidResourceTypeError(f"At least one {enum_type.__name__} is required")
    return ",".join(members)


def _results(payload: dict) -> dict:
    # Search endpoints wrap their data in a "results" object
    return payload.get("results", {}) if isinstance(payload, dict) else payload


def _bind_result_keys(results: AppleMusicModel) -> None:
    for name, field in type(results).model_fields.items():
        collection = getattr(results, name)
        if collection is not None:
            collection.bind_results_key(field.alias or name)


class CatalogSearchRequestBuilder(RequestBuilder):
    async def search(
        self,
        client: "ApiClient",
        types: Iterable[CatalogSearchType | str],
        term: str,
    ) -> CatalogSearchResults:
        """Search the catalog.

        Args:
            client: API client
            types: Resource types to include in the results
            term: Text entered for the search
        """
        context = self.request_context(client)
        params = (
            ("types", _join_members(CatalogSearchType, types)),
            ("term", format_term(term)),
        )

        payload = await client.request_json(
            "GET", f"/v1/catalog/{context.storefront}/search", params=context.query + params
        )

        results = parse_as(CatalogSearchResults, _results(payload))
        bind_context(results, context)
        _bind_result_keys(results)
        return results

    async def search_hints(self, client: "ApiClient", term: str, limit: int = 10) -> list[str]:
        """Get search term completions for a partial term."""
        context = self.request_context(client)
        params = (("limit", str(limit)), ("term", format_term(term)))

        payload = await client.request_json(
            "GET", f"/v1/catalog/{context.storefront}/search/hints", params=context.query + params
        )
        return parse_as(SearchHints, _results(payload)).terms

    async def suggestions(
        self,
        client: "ApiClient",
        kinds: Iterable[SuggestionKind | str],
        types: Iterable[CatalogSearchType | str],
        term: str,
        limit: int = DEFAULT_SUGGESTION_LIMIT,
    ) -> list[CatalogSearchSuggestion]:
        """Get term suggestions and top results for a partial term.

        Args:
            client: API client
            kinds: Kinds of suggestions to return
            types: Resource types for top result suggestions
            term: Text entered for the search
            limit: Number of suggestions, at most 10
        """
        context = self.request_context(client)
        params = (
            ("types", _join_members(CatalogSearchType, types)),
            ("kinds", _join_members(SuggestionKind, kinds)),
            ("term", format_term(term)),
            ("limit", str(limit)),
        )

        payload = await client.request_json(
            "GET",
            f"/v1/catalog/{context.storefront}/search/suggestions",
            params=context.query + params,
        )

        suggestions = parse_as(CatalogSearchSuggestions, _results(payload)).suggestions
        bind_context(suggestions, context)
        return suggestions


class LibrarySearchRequestBuilder(RequestBuilder):
    async def search(
        self,
        client: "ApiClient",
        types: Iterable[LibrarySearchType | str],
        term: str,
    ) -> LibrarySearchResults:
        """Search the user's library."""
        context = self.request_context(client)
        params = (
            ("types", _join_members(LibrarySearchType, types)),
            ("term", format_term(term)),
        )

        payload = await client.request_json(
            "GET", "/v1/me/library/search", params=context.query + params
        )

        results = parse_as(LibrarySearchResults, _results(payload))
        bind_context(results, context)
        _bind_result_keys(results)
        return results


class CatalogSearch:
    """Entry point for catalog searches."""

    @staticmethod
    def search() -> CatalogSearchRequestBuilder:
        return CatalogSearchRequestBuilder()


class LibrarySearch:
    """Entry point for library searches."""

    @staticmethod
    def search() -> LibrarySearchRequestBuilder:
        return LibrarySearchRequestBuilder()

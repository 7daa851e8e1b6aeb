"""Request context carried by fetched relationships and views."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

if TYPE_CHECKING:
    from am_api.client import ApiClient

QueryParams = tuple[tuple[str, str], ...]


@dataclass(frozen=True)
class RequestContext:
    """Storefront and query parameters a response was fetched with.

    Follow-up page requests for nested collections reuse ``query`` so that
    localization, extensions and includes stay the same across pages.
    """

    storefront: str
    query: QueryParams = field(default_factory=tuple)

    @classmethod
    def for_client(cls, client: "ApiClient") -> "RequestContext":
        return cls(storefront=client.storefront, query=(("l", client.localization),))

    def with_params(self, *params: tuple[str, str]) -> "RequestContext":
        return RequestContext(storefront=self.storefront, query=self.query + tuple(params))


def bind_context(value: Any, context: RequestContext) -> None:
    """Attach ``context`` to every collection nested inside ``value``.

    Walks pydantic models, lists and tuples. Anything exposing a
    ``bind_context`` method receives the context.
    """
    if isinstance(value, BaseModel):
        binder = getattr(value, "bind_context", None)
        if callable(binder):
            binder(context)
        for name in type(value).model_fields:
            bind_context(getattr(value, name), context)
    elif isinstance(value, (list, tuple)):
        for item in value:
            bind_context(item, context)

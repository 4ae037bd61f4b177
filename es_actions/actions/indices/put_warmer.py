"""Create or update an index warmer.

A warmer runs registered queries before an index is refreshed, so caches for
popular filters, facets and sorts are populated before the first search.

Arguments:
    index: Index name or list of names; omit or use ``_all`` for all indices
    type: Document type or list of types; omit for all types
    name: Warmer name (required)
    body: Search request definition for the warmer (required)
    allow_no_indices: Ignore a wildcard expression resolving to no indices
    expand_wildcards: Expand wildcards to ``open`` or ``closed`` indices
    ignore_indices: Ignore ``missing`` indices (legacy, ``none`` or ``missing``)
    ignore_unavailable: Ignore unavailable (missing, closed) concrete indices
"""

from es_actions.runtime.rest import HTTP_PUT, ActionSpec

SPEC = ActionSpec(
    id="put_warmer",
    method=HTTP_PUT,
    path=("{index}", "{type}", "_warmer", "{name}"),
    required=("name", "body"),
    params=frozenset(
        {
            "allow_no_indices",
            "expand_wildcards",
            "ignore_indices",
            "ignore_unavailable",
        }
    ),
    body=True,
)

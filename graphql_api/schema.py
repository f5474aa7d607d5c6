import logging
from typing import Any, Optional

from ariadne import graphql, make_executable_schema
from django.conf import settings

from .context import UploadsContext
from .helpers.ariadne import ariadne_load_local_graphql
from .types.enums import enum_types
from .types.mutation import mutation, mutation_resolvers
from .types.query import query, query_bindable
from .types.upload import upload, upload_bindable
from .types.uploads_card import (
    upload_provider_group_bindable,
    uploads_card,
    uploads_card_bindable,
)

log = logging.getLogger(__name__)

# graphql_api.types is imported by the services for its enums, so the schema
# is assembled here rather than in the package itself
inputs = ariadne_load_local_graphql(__file__, "./types/inputs")
enums = ariadne_load_local_graphql(__file__, "./types/enums")
errors = ariadne_load_local_graphql(__file__, "./types/errors")
types = [
    enums,
    errors,
    inputs,
    mutation,
    query,
    upload,
    uploads_card,
]

bindables = [
    *enum_types,
    *mutation_resolvers,
    query_bindable,
    upload_bindable,
    upload_provider_group_bindable,
    uploads_card_bindable,
]

# convert_names_case automatically converts the field name from camelCase
# to snake_case. See: https://ariadnegraphql.org/docs/api-reference#optional-arguments-10
schema = make_executable_schema(types, *bindables, convert_names_case=True)


async def execute_query(
    query: str,
    context_value: UploadsContext,
    variables: Optional[dict] = None,
    operation_name: Optional[str] = None,
) -> dict[str, Any]:
    data = {"query": query, "variables": variables or {}}
    if operation_name:
        data["operationName"] = operation_name

    success, result = await graphql(
        schema, data, context_value=context_value, debug=settings.DEBUG
    )
    if not success or result.get("errors"):
        log.warning(
            "GraphQL query returned errors",
            extra=dict(
                operation_name=operation_name, errors=result.get("errors", [])
            ),
        )
    return result

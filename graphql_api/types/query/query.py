from typing import Any, List, Optional

from ariadne import ObjectType
from graphql import GraphQLResolveInfo
from sentry_sdk import Scope

from core.commands.upload import UploadCommands
from graphql_api.helpers.ariadne import ariadne_load_local_graphql
from services.uploads import ExtractedUploads

query = ariadne_load_local_graphql(__file__, "query.graphql")
query_bindable = ObjectType("Query")


def query_name(info: GraphQLResolveInfo) -> Optional[str]:
    if info.operation and info.operation.name:
        return info.operation.name.value


def configure_sentry_scope(query_name: Optional[str]) -> None:
    # this sets the Sentry transaction name to the GraphQL query name which
    # should make it easier to search/filter transactions

    # https://docs.sentry.io/platforms/python/enriching-events/transaction-name/
    scope = Scope.get_current_scope()
    if scope.transaction:
        scope.transaction.name = f"GraphQL [{query_name}]"


@query_bindable.field("uploadsCard")
def resolve_uploads_card(
    _: Any, info: GraphQLResolveInfo, filters: Optional[dict] = None
) -> ExtractedUploads:
    configure_sentry_scope(query_name(info))

    command: UploadCommands = info.context["executor"].get_command("upload")
    return command.extract_uploads(info.context.get("commit_uploads"), filters)


@query_bindable.field("ignoredUploadIds")
async def resolve_ignored_upload_ids(_: Any, info: GraphQLResolveInfo) -> List[int]:
    configure_sentry_scope(query_name(info))

    command: UploadCommands = info.context["executor"].get_command("upload")
    return await command.get_ignored_upload_ids()

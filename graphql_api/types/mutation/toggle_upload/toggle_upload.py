from ariadne import UnionType
from graphql import GraphQLResolveInfo

from core.commands.upload import UploadCommands
from graphql_api.helpers.mutation import (
    resolve_union_error_type,
    wrap_error_handling_mutation,
)


@wrap_error_handling_mutation
async def resolve_toggle_upload(_, info: GraphQLResolveInfo, input) -> dict:
    command: UploadCommands = info.context["executor"].get_command("upload")
    extracted = command.extract_uploads(
        info.context.get("commit_uploads"), input.get("filters")
    )
    group = await command.toggle_upload(
        extracted.grouped_uploads, input.get("provider"), input.get("index")
    )
    return {
        "selection_state": group.state,
        "selected_indices": group.selected_indices,
        "ignored_upload_ids": await command.get_ignored_upload_ids(),
    }


error_toggle_upload = UnionType("ToggleUploadError")
error_toggle_upload.type_resolver(resolve_union_error_type)

from typing import List

from ariadne import ObjectType
from graphql import GraphQLResolveInfo

from core.commands.upload import UploadCommands
from graphql_api.types.enums import SelectionState
from reports.types import provider_label
from services.upload_selection import ProviderGroupSelection
from services.uploads import ExtractedUploads

uploads_card_bindable = ObjectType("UploadsCard")
upload_provider_group_bindable = ObjectType("UploadProviderGroup")


@uploads_card_bindable.field("groups")
async def resolve_groups(
    extracted: ExtractedUploads, info: GraphQLResolveInfo
) -> List[ProviderGroupSelection]:
    command: UploadCommands = info.context["executor"].get_command("upload")
    selection = await command.get_upload_selection(extracted.grouped_uploads)
    # empty while searching, the search results replace the groups
    return [selection.get_group(provider) for provider in extracted.visible_groups]


@uploads_card_bindable.field("ignoredUploadIds")
async def resolve_ignored_upload_ids(
    extracted: ExtractedUploads, info: GraphQLResolveInfo
) -> List[int]:
    command: UploadCommands = info.context["executor"].get_command("upload")
    return await command.get_ignored_upload_ids()


@upload_provider_group_bindable.field("label")
def resolve_label(group: ProviderGroupSelection, info: GraphQLResolveInfo) -> str:
    return provider_label(group.provider)


@upload_provider_group_bindable.field("selectionState")
def resolve_selection_state(
    group: ProviderGroupSelection, info: GraphQLResolveInfo
) -> SelectionState:
    return group.state

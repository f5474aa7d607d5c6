from typing import List

from ariadne import ObjectType
from graphql import GraphQLResolveInfo

from core.commands.upload import UploadCommands
from reports.types import Upload
from services.upload_errors import UploadErrorDisplay

upload_bindable = ObjectType("Upload")


@upload_bindable.field("errors")
def resolve_errors(
    upload: Upload, info: GraphQLResolveInfo
) -> List[UploadErrorDisplay]:
    command: UploadCommands = info.context["executor"].get_command("upload")
    return command.get_upload_errors(upload)


@upload_bindable.field("warnings")
def resolve_warnings(upload: Upload, info: GraphQLResolveInfo) -> List[str]:
    command: UploadCommands = info.context["executor"].get_command("upload")
    return command.get_upload_warnings(upload)

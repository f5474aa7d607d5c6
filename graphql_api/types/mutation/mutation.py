from ariadne import MutationType

from .toggle_upload import error_toggle_upload, resolve_toggle_upload
from .toggle_upload_group import error_toggle_upload_group, resolve_toggle_upload_group

mutation_bindable = MutationType()

# Here, bind the resolvers from each subfolder to the Mutation type
mutation_bindable.field("toggleUploadGroup")(resolve_toggle_upload_group)
mutation_bindable.field("toggleUpload")(resolve_toggle_upload)

mutation_resolvers = [
    mutation_bindable,
    error_toggle_upload_group,
    error_toggle_upload,
]

from graphql_api.helpers.ariadne import ariadne_load_local_graphql

from .mutation import mutation_resolvers  # noqa: F401
from .toggle_upload import gql_toggle_upload
from .toggle_upload_group import gql_toggle_upload_group

mutation = ariadne_load_local_graphql(__file__, "mutation.graphql")
mutation = mutation + gql_toggle_upload_group
mutation = mutation + gql_toggle_upload

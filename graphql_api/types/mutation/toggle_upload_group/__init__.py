from graphql_api.helpers.ariadne import ariadne_load_local_graphql

from .toggle_upload_group import error_toggle_upload_group, resolve_toggle_upload_group

gql_toggle_upload_group = ariadne_load_local_graphql(__file__, "toggle_upload_group.graphql")


__all__ = ["error_toggle_upload_group", "resolve_toggle_upload_group"]

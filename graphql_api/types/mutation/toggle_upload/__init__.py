from graphql_api.helpers.ariadne import ariadne_load_local_graphql

from .toggle_upload import error_toggle_upload, resolve_toggle_upload

gql_toggle_upload = ariadne_load_local_graphql(__file__, "toggle_upload.graphql")


__all__ = ["error_toggle_upload", "resolve_toggle_upload"]

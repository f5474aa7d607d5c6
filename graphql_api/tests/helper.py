from asgiref.sync import async_to_sync

from graphql_api.context import build_context
from graphql_api.schema import execute_query


class GraphQLTestHelper:
    def gql_request(
        self,
        query,
        commit_uploads=None,
        provider="github",
        session_key="session",
        variables=None,
        with_errors=False,
    ):
        context = build_context(
            provider, session_key=session_key, commit_uploads=commit_uploads
        )
        result = async_to_sync(execute_query)(query, context, variables=variables)
        return result if with_errors else result["data"]

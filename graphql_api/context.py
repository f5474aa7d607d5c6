from typing import Any, List, Optional, TypedDict

from dashboard.commands.executor import Executor


class UploadsContext(TypedDict):
    """
    What the resolvers find in `info.context`. `commit_uploads` holds the
    commit's uploads as fetched from the API (a list of nodes or a
    connection).
    """

    service: str
    executor: Executor
    commit_uploads: Optional[List[Any]]


def build_context(
    service: str,
    session_key: Optional[str] = None,
    commit_uploads: Optional[Any] = None,
) -> UploadsContext:
    return {
        "service": service,
        "executor": Executor(service, session_key),
        "commit_uploads": commit_uploads,
    }

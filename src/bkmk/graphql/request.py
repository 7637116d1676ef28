from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Union

from bkmk.errors import SerializationError
from bkmk.graphql.queries import LOGIN_QUERY, MUTATIONS_QUERY, QUERIES_QUERY


@dataclass(frozen=True)
class Login:
    username: str
    password: str


@dataclass(frozen=True)
class QueryTypeList:
    pass


@dataclass(frozen=True)
class MutationTypeList:
    pass


Operation = Union[Login, QueryTypeList, MutationTypeList]


@dataclass(frozen=True)
class LoginVariables:
    username: str
    password: str
    # Not exposed on the command line.
    remember: bool = False


@dataclass(frozen=True)
class GraphQLRequest:
    query: str
    variables: Optional[LoginVariables] = None

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"query": self.query}
        if self.variables is not None:
            payload["variables"] = asdict(self.variables)
        return payload


def build_request(operation: Operation) -> GraphQLRequest:
    if isinstance(operation, Login):
        return GraphQLRequest(
            query=LOGIN_QUERY,
            variables=LoginVariables(username=operation.username, password=operation.password),
        )
    if isinstance(operation, QueryTypeList):
        return GraphQLRequest(query=QUERIES_QUERY)
    if isinstance(operation, MutationTypeList):
        return GraphQLRequest(query=MUTATIONS_QUERY)
    raise TypeError(f"Unsupported operation: {operation!r}")


def serialize_request(request: GraphQLRequest) -> bytes:
    """
    Compact JSON body for a request. The ``variables`` key is left out entirely
    when the request has none.
    """
    try:
        body = json.dumps(request.to_payload(), ensure_ascii=False, separators=(",", ":"))
        return body.encode("utf-8")
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Could not encode request body as JSON: {e}") from e

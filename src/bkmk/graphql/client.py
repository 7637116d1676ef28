from __future__ import annotations

import logging
from dataclasses import dataclass, field

import requests
from requests.utils import get_encoding_from_headers

from bkmk.errors import DecodeError, TransportError
from bkmk.graphql.request import GraphQLRequest, serialize_request

log = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"


def decode_body(response: requests.Response) -> str:
    """
    Decode the full response body using the charset from Content-Type, or UTF-8
    when none is declared.
    """
    content_type = response.headers.get("content-type", "")
    encoding = DEFAULT_ENCODING
    if "charset" in content_type.lower():
        encoding = get_encoding_from_headers(response.headers) or DEFAULT_ENCODING

    try:
        return response.content.decode(encoding)
    except LookupError as e:
        raise DecodeError(f"Response declares unknown charset {encoding!r}") from e
    except UnicodeDecodeError as e:
        raise DecodeError(f"Response body is not valid {encoding} text: {e}") from e


@dataclass
class BookmarksGraphQLClient:
    endpoint: str
    session: requests.Session = field(init=False)

    def __post_init__(self) -> None:
        self.session = requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})

    def fetch_graphql(self, request: GraphQLRequest) -> str:
        """
        POST one GraphQL request and return the response body as text.

        The HTTP status is not inspected and no timeout is set, so requests'
        default (wait indefinitely) applies.
        """
        payload = serialize_request(request)
        log.debug("POST %s (%d bytes)", self.endpoint, len(payload))

        try:
            r = self.session.post(self.endpoint, data=payload)
        except requests.exceptions.Timeout as e:
            raise TransportError(f"Request to {self.endpoint} timed out: {e}") from e
        except requests.exceptions.ConnectionError as e:
            raise TransportError(f"Could not connect to {self.endpoint}: {e}") from e
        except (
            requests.exceptions.MissingSchema,
            requests.exceptions.InvalidSchema,
            requests.exceptions.InvalidURL,
        ) as e:
            raise TransportError(f"Invalid endpoint {self.endpoint!r}: {e}") from e
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Request to {self.endpoint} failed: {e}") from e

        log.debug("HTTP %s from %s (%d bytes)", r.status_code, self.endpoint, len(r.content))
        return decode_body(r)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> BookmarksGraphQLClient:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

from __future__ import annotations
import argparse
import sys
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from bkmk.config import VERSION
from bkmk.errors import BookmarksClientError
from bkmk.graphql.client import BookmarksGraphQLClient
from bkmk.graphql.request import Login, MutationTypeList, Operation, QueryTypeList, build_request

from bkmk.logging_conf import setup_logging


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="bkmk", description="Bookmarks client")
    p.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    p.add_argument("endpoint", help="Endpoint to connect to")
    sub = p.add_subparsers(dest="command", required=True, metavar="command")

    p_login = sub.add_parser("login", help="Login to the bookmarks server")
    p_login.add_argument("-u", "--username", required=True, help="Username for login query")
    p_login.add_argument("-p", "--password", required=True, help="Password for login query")
    p_login.set_defaults(operation=lambda args: Login(username=args.username, password=args.password))

    p_queries = sub.add_parser("query-type", help="Retrieve a list of queries to the API from the server")
    p_queries.set_defaults(operation=lambda args: QueryTypeList())

    p_mutations = sub.add_parser("mutation-type", help="Retrieve a list of API mutations from the server")
    p_mutations.set_defaults(operation=lambda args: MutationTypeList())

    return p


def operation_from_args(args: argparse.Namespace) -> Operation:
    return args.operation(args)


def main(argv: Optional[List[str]] = None) -> int:
    setup_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    request = build_request(operation_from_args(args))

    try:
        with BookmarksGraphQLClient(args.endpoint) as client:
            body = client.fetch_graphql(request)
    except BookmarksClientError as e:
        Console(stderr=True).print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        return 1

    sys.stdout.flush()
    sys.stdout.buffer.write((body + "\n").encode("utf-8"))
    sys.stdout.buffer.flush()
    return 0


def run() -> None:
    try:
        raise SystemExit(main())
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        raise SystemExit(130)
    except Exception as e:
        print(f"\nError: {e}", file=sys.stderr)
        raise SystemExit(1)


if __name__ == "__main__":
    run()

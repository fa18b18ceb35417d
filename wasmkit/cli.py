"""Command line interface: fetch runtimes from URLs, releases or nodes."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from importlib import metadata
from pathlib import Path
from typing import Callable, TypeVar

import requests

from .buildinfo import COMMIT_ENV, DATE_ENV, version_string
from .chains import ChainInfo, EndpointType, NodeEndpoint
from .errors import NotFound, WasmkitError
from .fetch import fetch_at_url, get_output_file_local, select_url
from .github_ref import GithubRef

log = logging.getLogger(__name__)

PROG = "wasmkit"
_LOG_ENV = "WASMKIT_LOG"
_CODE_KEY = "0x" + b":code".hex()
_TIMEOUT = 60

_T = TypeVar("_T")


def _package_version() -> str:
    try:
        return metadata.version(PROG)
    except metadata.PackageNotFoundError:
        return "0.0.0"


def _arg_type(parse: Callable[[str], _T], what: str) -> Callable[[str], _T]:
    def convert(text: str) -> _T:
        try:
            return parse(text)
        except WasmkitError as exc:
            raise argparse.ArgumentTypeError(str(exc)) from None

    convert.__name__ = what
    return convert


def _global_flags(parser: argparse.ArgumentParser, *, defaults: bool) -> None:
    def default(value):
        return value if defaults else argparse.SUPPRESS

    parser.add_argument("-j", "--json", action="store_true", default=default(False), help="Output as json")
    parser.add_argument("-q", "--quiet", action="store_true", default=default(False), help="Less output")
    parser.add_argument(
        "-n",
        "--no-color",
        dest="no_color",
        action="store_true",
        default=default(bool(os.environ.get("NO_COLOR"))),
        help="Do not write color information to the output. Recommended for scripts.",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its global flags and sub-commands."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Fetch and handle WASM runtimes of Substrate based chains.",
    )
    _global_flags(parser, defaults=True)
    parser.add_argument("-v", "--version", "--V", action="store_true", help="Show the version")

    common = argparse.ArgumentParser(add_help=False)
    _global_flags(common, defaults=False)

    commands = parser.add_subparsers(dest="command", metavar="COMMAND")
    get = commands.add_parser(
        "get",
        parents=[common],
        help="Get/Download the runtime wasm",
        description="Get/Download the runtime wasm from a URL, a release or a running node.",
    )
    get.add_argument(
        "rpc_url",
        nargs="?",
        type=_arg_type(NodeEndpoint.from_str, "endpoint"),
        help="The node url including the port number, e.g. http://localhost:9933",
    )
    get.add_argument(
        "-c",
        "--chain",
        type=_arg_type(ChainInfo.from_str, "chain"),
        help="The name of a chain or an alias. 'local' is http://localhost:9933",
    )
    get.add_argument("-b", "--block", help="The block hash where to fetch the runtime (requires --chain)")
    get.add_argument("-u", "--url", help="Load the wasm from a URL (no node)")
    get.add_argument("-g", "--github", "--gh", help="Load the wasm from a release: <runtime>@<version>")
    get.add_argument(
        "-o",
        "--output",
        "--out",
        type=Path,
        help="Where to save the runtime; defaults to the first free runtime_NNN.wasm",
    )
    return parser


def _validate_get(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    if all(getattr(args, name) is None for name in ("rpc_url", "chain", "url", "github")):
        parser.error("get: one of <rpc_url>, --chain, --url or --github is required")
    if args.rpc_url is not None:
        for name in ("chain", "url", "github"):
            if getattr(args, name) is not None:
                parser.error(f"get: argument --{name} cannot be used with <rpc_url>")
    if args.block is not None and args.chain is None:
        parser.error("get: argument --block requires --chain")


def _download_runtime(endpoint: NodeEndpoint, block: str | None, target: Path | None) -> Path:
    """Read the runtime code from a node over JSON-RPC and save it."""
    if endpoint.kind is not EndpointType.HTTP:
        raise WasmkitError(f"Only http(s) endpoints can be used to download a runtime, got {endpoint}")
    params = [_CODE_KEY] if block is None else [_CODE_KEY, block]
    payload = {"jsonrpc": "2.0", "id": 1, "method": "state_getStorage", "params": params}
    log.info("Downloading runtime from %s", endpoint)
    try:
        resp = requests.post(endpoint.as_url(), json=payload, timeout=_TIMEOUT)
        resp.raise_for_status()
        body = resp.json()
    except (requests.RequestException, ValueError) as exc:
        raise WasmkitError("Request error") from exc
    if not isinstance(body, dict):
        raise WasmkitError("Unexpected response from the node")
    if "error" in body:
        raise WasmkitError(f"The node returned an error: {body['error']}")
    result = body.get("result")
    if not isinstance(result, str):
        raise NotFound(":code")
    try:
        wasm = bytes.fromhex(result[2:] if result.startswith("0x") else result)
    except ValueError as exc:
        raise WasmkitError("The node returned invalid hex") from exc
    log.info("Got the runtime, its size is %d", len(wasm))
    outfile = get_output_file_local(target)
    log.info("Saving runtime to %s", outfile)
    try:
        outfile.write_bytes(wasm)
    except OSError as exc:
        raise WasmkitError("i/o error") from exc
    return outfile


def _run_get(args: argparse.Namespace) -> Path:
    gh_url = GithubRef.from_str(args.github).as_url() if args.github is not None else None
    download_url = select_url(gh_url, args.url)
    log.debug("download_url: %s", download_url)

    if args.rpc_url is not None:
        rpc: NodeEndpoint | None = args.rpc_url
    elif args.chain is not None:
        rpc = NodeEndpoint.from_str(args.chain.get_random_url(None))
    else:
        rpc = None

    if download_url is not None:
        output = fetch_at_url(download_url, get_output_file_local(args.output))
        if not output.exists():
            raise WasmkitError("Failed fetching file")
        log.info("Got runtime at %s", output)
        return output
    if rpc is not None:
        return _download_runtime(rpc, args.block, args.output)
    raise WasmkitError("Pass either --url or --github, not both")


def _print_version(as_json: bool) -> None:
    commit = os.environ.get(COMMIT_ENV)
    date = os.environ.get(DATE_ENV)
    version = _package_version()
    if as_json:
        data = {"name": PROG, "version": version, "commit": commit or "", "build_date": date or ""}
        print(json.dumps(data, indent=2))
    else:
        print(version_string(PROG, version, commit, date))


def _configure_logging() -> None:
    level = os.environ.get(_LOG_ENV)
    if level:
        logging.basicConfig(level=level.upper())


def main(argv: list[str] | None = None) -> int:
    """Run the command line; return the process exit status."""
    _configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "get":
        _validate_get(parser, args)
    try:
        if args.command == "get":
            _run_get(args)
            return 0
        if args.version:
            _print_version(args.json)
            return 0
    except WasmkitError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    parser.print_help(sys.stderr)
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
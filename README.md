# wasmkit

Helpers for working with Substrate WASM runtimes: work out where a runtime
lives (a local file, a plain download URL, a release tag such as
`kusama@0.9.42`, a chain alias or a node's RPC endpoint), download it to
disk, and write runtime metadata and runtime summaries in several formats.

## Installation

```
pip install wasmkit
```

To run the test suite:

```
pip install "wasmkit[test]"
pytest
```

## Command line

Installing the package provides the `wasmkit` command.

```
wasmkit --help
wasmkit --version
wasmkit --version --json
```

`--version` prints `wasmkit v<version>`, followed by `-<commit>` and
` built <date>` when the `WASMKIT_GIT_COMMIT_HASH` and `WASMKIT_BUILD_DATE`
environment variables are set. With `--json` the same data is printed as a
JSON object with the keys `name`, `version`, `commit` and `build_date`.

### `get`

Download a runtime from a node, from a known chain, from a URL or from a
release tag:

```
wasmkit get http://localhost:9933 --output runtime.wasm
wasmkit get --chain local
wasmkit get --github kusama@0.9.42
wasmkit get --url https://example.com/runtime.compact.compressed.wasm
```

Options of `get`:

- `rpc_url` (positional): a node endpoint such as `http://localhost:9933`.
- `-c`, `--chain`: a chain name or alias (case-insensitive); a random known
  endpoint of that chain is used. `local` is `http://localhost:9933`.
- `-b`, `--block`: a block hash to read the runtime at; requires `--chain`.
- `-u`, `--url`: download the file at this URL.
- `-g`, `--github`, `--gh`: download a release given as `<runtime>@<version>`.
- `-o`, `--output`, `--out`: where to save the runtime.

One of `rpc_url`, `--chain`, `--url` or `--github` is required, and
`rpc_url` cannot be combined with the other three. When exactly one of
`--url` and `--github` is given, that file is downloaded; otherwise the
runtime is read from the node with the `state_getStorage` JSON-RPC call on
the `:code` key. Only `http` and `https` endpoints can be used for this;
WebSocket endpoints are rejected with an error.

Without `--output`, the runtime is saved in the current directory as the
first free name among `runtime_000.wasm`, `runtime_001.wasm` and so on, so an
earlier download is never overwritten.

Global flags: `-j`/`--json`, `-q`/`--quiet` and `-n`/`--no-color` (also set
through the `NO_COLOR` environment variable). Setting `WASMKIT_LOG` to a
logging level name such as `debug` turns on log output.

Exit status: 0 on success, 1 when the command fails, 2 on a usage error or
when no command is given (the help is then printed).

## Library

### Chains and endpoints

```python
from wasmkit.chains import ChainInfo, EndpointType, NodeEndpoint, get_chain_urls

info = ChainInfo.from_str("PolkaDOT")            # names and aliases are case-insensitive
url = info.get_random_url(EndpointType.WEBSOCKET)
get_chain_urls("ksm")                             # list of NodeEndpoint
NodeEndpoint.from_str("http://localhost:9933").kind   # EndpointType.HTTP
```

Known names: `polkadot`/`dot`, `kusama`/`ksm`, `westend`/`wnd`, `rococo`,
`statemint`, `statemine`, `westmint`, `karura`/`kar`, `moonbase`,
`moonriver`/`movr`, `moonbeam`/`glmr` and `local`.

### Release references

```python
from wasmkit.github_ref import GithubRef

ref = GithubRef.from_str("kusama@1.2.3")   # a leading "v" on the version is accepted
ref.runtime_version()                      # "230"
ref.as_url()                               # download URL of the compressed runtime
```

### Sources

```python
from wasmkit.source import parse_source, get_source_type, source_from_options, get_source

parse_source("dot")                    # AliasSource
parse_source("kusama@0.9.42")          # GithubSource
parse_source("ws://localhost:9944")    # ChainSource
```

`parse_source` tries, in order, a release reference, a chain alias, an
existing path and a URL. A URL whose text contains `wasm` is fetched to see
whether it is large enough (at least 500,000 bytes) to be a runtime, and
becomes a `UrlSource`; other http(s)/ws(s) URLs become a `ChainSource`.
`FileSource`, `UrlSource` and `GithubSource` have `as_file()`, which returns
a local path, downloading into a temporary file where needed.
`get_source` picks a source from a file, a `ChainInfo`, a block hash and a
URL, in that order of preference, and downloads a URL right away.

### Downloads and output

`wasmkit.fetch` provides `fetch_at_url`, `is_wasm_from_url`,
`get_output_file_local`, `get_output_file_tmp` (a fresh name in a `wasmkit`
folder of the temp directory), `select_url` and `print_big_output_safe`,
which prints without failing when the reader closes the pipe early.

### Metadata

`wasmkit.metadata` holds plain dataclasses for metadata (`RuntimeMetadata`
with V12/V13 `Module`s or V14 `Pallet`s and `Variant`s, plus its encoded
bytes) and `MetadataWriter`, which writes it to a binary stream:

```python
import sys
from wasmkit.metadata import MetadataWriter, OutputFormat

fmt = OutputFormat.parse("scale+hex")      # also human, json, scale, hex+scale, json+scale
writer = MetadataWriter(metadata)
writer.write(fmt, None, sys.stdout.buffer)
writer.write(OutputFormat.HUMAN, "balances", sys.stdout.buffer)
fmt.default_filename()                     # "metadata.hex"
```

Only the human format accepts a pallet filter; the others raise
`UnsupportedFilter` when given one.

### Runtime summaries and filters

`wasmkit.runtime_info.RuntimeInfo` and `CoreVersion` hold a runtime's size,
compression, reserved meta, versions and hashes, and render them as text
(`render`, `render_version`) or JSON (`to_dict`, `print(json=True)`).
`wasmkit.filters.Filter.from_str("Balances.transfer")` gives
`Filter(module="balances", call="transfer")`.
`wasmkit.buildinfo` provides `git_commit_hash`, `build_date` and
`version_string`.

Every error raised by the package derives from `wasmkit.errors.WasmkitError`.

## What it does not do

The package does not load or execute WASM. It cannot decode metadata out of
a runtime file, compute its hashes or sizes, compress or decompress it, or
compare two runtimes: `RuntimeMetadata` and `RuntimeInfo` must be filled in
by the caller. The command line therefore has only `get`; there are no
`info`, `version`, `metadata`, `show`, `diff`, `compress` or `decompress`
commands. Runtimes are read from nodes over HTTP only, not over WebSocket.
"""Output helpers and downloading runtimes over HTTP."""

from __future__ import annotations

import logging
import sys
import tempfile
import uuid
from pathlib import Path

import requests

from .errors import WasmkitError

log = logging.getLogger(__name__)

MIN_RUNTIME_SIZE = 500_000
_MAX_LOCAL_INDEX = 1000
_CHUNK_SIZE = 64 * 1024
_TIMEOUT = 60


def print_big_output_safe(text: str) -> None:
    """Print to stdout, ignoring a reader that closed the pipe early."""
    try:
        print(text, file=sys.stdout)
        sys.stdout.flush()
    except BrokenPipeError:
        return
    except OSError as exc:
        raise WasmkitError("i/o error") from exc


def get_output_file_tmp() -> Path:
    """Return a fresh ``.wasm`` file name inside a package folder of the temp dir."""
    folder = Path(tempfile.gettempdir()) / "wasmkit"
    folder.mkdir(exist_ok=True)
    return folder / f"{uuid.uuid4()}.wasm"


def get_output_file_local(wish: str | Path | None = None) -> Path:
    """Return ``wish`` or the first unused ``runtime_NNN.wasm`` in the current folder."""
    if wish is not None:
        return Path(wish)
    for index in range(_MAX_LOCAL_INDEX - 1):
        path = Path(f"runtime_{index:03}.wasm")
        if not path.exists():
            return path
    raise WasmkitError("Ran out of indexes")


def fetch_at_url(url: str, target: str | Path | None = None) -> Path:
    """Download ``url`` into ``target`` (a temp file by default) and return the path."""
    log.debug("Fetching from %s", url)
    target = Path(target) if target is not None else get_output_file_tmp()
    try:
        with requests.get(str(url), stream=True, timeout=_TIMEOUT) as resp:
            if not resp.ok:
                raise WasmkitError(f"Failed fetching url at {url}")
            try:
                with target.open("wb") as out:
                    for chunk in resp.iter_content(chunk_size=_CHUNK_SIZE):
                        out.write(chunk)
            except OSError as exc:
                raise WasmkitError("i/o error") from exc
    except requests.RequestException as exc:
        raise WasmkitError("Request error") from exc
    return target


def is_wasm_from_url(url: str) -> bool:
    """Guess whether ``url`` serves a runtime, judging by its size alone."""
    try:
        with requests.get(str(url), stream=True, timeout=_TIMEOUT) as resp:
            if not resp.ok:
                log.debug("Error while trying to fetch runtime at %s", url)
                return False
            length = resp.headers.get("Content-Length")
            if length is not None and length.isdigit():
                log.debug("The data we got from %s is %s bytes long", url, length)
                return int(length) >= MIN_RUNTIME_SIZE
            try:
                data = resp.content
            except requests.RequestException:
                return False
            return len(data) >= MIN_RUNTIME_SIZE
    except requests.RequestException as exc:
        raise WasmkitError("i/o error") from exc


def select_url(gh_url: str | None, dl_url: str | None) -> str | None:
    """Return whichever URL was given, or None if both or neither were."""
    if (gh_url is None) == (dl_url is None):
        return None
    return gh_url if gh_url is not None else dl_url
"""References to released runtimes in the form ``<runtime>@<version>``."""

from __future__ import annotations

from dataclasses import dataclass

import semver

from .errors import WasmkitError

_RELEASE_URL = (
    "https://github.com/paritytech/polkadot/releases/download/"
    "v{version}/{runtime}_runtime-v{runtime_version}.compact.compressed.wasm"
)


@dataclass(frozen=True)
class GithubRef:
    """A runtime name paired with a release version."""

    runtime: str
    version: semver.Version

    @classmethod
    def from_str(cls, s: str) -> "GithubRef":
        """Parse ``<runtime>@<version>``; a leading ``v`` on the version is allowed."""
        parts = s.split("@")
        if len(parts) != 2:
            raise WasmkitError("Unsupported Github version format, should be <runtime>@<version>")
        runtime, version = parts[0], parts[1].replace("v", "")
        try:
            parsed = semver.Version.parse(version)
        except (ValueError, TypeError) as exc:
            raise WasmkitError("Version parsing error") from exc
        return cls(runtime, parsed)

    def runtime_version(self) -> str:
        """The spec version used in release file names, e.g. ``9420`` for 0.9.42."""
        digits = str(self.version).replace(".", "") + "0"
        return digits[1:]

    def as_url(self) -> str:
        """The download URL of the release; it is not checked to exist."""
        return _RELEASE_URL.format(
            version=self.version,
            runtime=self.runtime,
            runtime_version=self.runtime_version(),
        )

    def __str__(self) -> str:
        return f"{self.runtime}@{self.version}"
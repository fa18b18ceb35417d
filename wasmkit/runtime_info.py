"""Summary information about a runtime."""

from __future__ import annotations

import json as jsonlib
from dataclasses import dataclass, field

MAX_SIZE_COMPRESSED_MB = 2.0

_WIDTH_EMOJI = 1
_WIDTH_TITLE = 25


@dataclass(frozen=True)
class CoreVersion:
    """The version a runtime reports about itself."""

    spec_name: str
    impl_name: str
    authoring_version: int
    spec_version: int
    impl_version: int
    transaction_version: int
    state_version: int = 0
    apis: list[tuple[str, int]] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "specName": self.spec_name,
            "implName": self.impl_name,
            "authoringVersion": self.authoring_version,
            "specVersion": self.spec_version,
            "implVersion": self.impl_version,
            "apis": [[api_id, version] for api_id, version in self.apis],
            "transactionVersion": self.transaction_version,
            "stateVersion": self.state_version,
        }

    def __str__(self) -> str:
        return (
            f"{self.spec_name}-{self.spec_version} "
            f"({self.impl_name}-{self.impl_version}.tx{self.transaction_version}.au{self.authoring_version})"
        )


def _line(emoji: str, title: str, value: str) -> str:
    return f"{emoji:<{_WIDTH_EMOJI}} {title:<{_WIDTH_TITLE}} {value}"


@dataclass(frozen=True)
class RuntimeInfo:
    """Size, compression, versions and hashes of a runtime."""

    size: int
    compressed: bool
    compression_ratio: float
    reserved_meta: bytes
    reserved_meta_valid: bool
    metadata_version: int
    core_version: CoreVersion
    proposal_hash: str
    parachain_authorize_upgrade_hash: str
    ipfs_hash: str
    blake2_256: str

    def to_dict(self) -> dict:
        return {
            "size": self.size,
            "compression": {"compressed": self.compressed, "compression_ratio": self.compression_ratio},
            "reserved_meta": list(self.reserved_meta),
            "reserved_meta_valid": self.reserved_meta_valid,
            "metadata_version": self.metadata_version,
            "core_version": self.core_version.to_dict(),
            "proposal_hash": self.proposal_hash,
            "parachain_authorize_upgrade_hash": self.parachain_authorize_upgrade_hash,
            "ipfs_hash": self.ipfs_hash,
            "blake2_256": self.blake2_256,
        }

    def render(self) -> str:
        """The human readable summary, one line per item."""
        size_mb = self.size / 1024.0 / 1024.0
        warning = "⚠️ HEAVY" if size_mb >= MAX_SIZE_COMPRESSED_MB else ""
        lines = [_line("🏋️ ", "Runtime size:", f"{size_mb:.3f} MB ({self.size:,} bytes) {warning}")]
        if self.compressed:
            saved = 100.0 - self.compression_ratio * 100.0
            lines.append(_line("🗜 ", "Compressed:", f"Yes, {saved:.2f}%"))
        else:
            lines.append(_line("🗜", "Compressed:", "No"))
        meta_hex = "[" + ", ".join(f"{b:02X}" for b in self.reserved_meta) + "]"
        status = "OK" if self.reserved_meta_valid else "Unknown!"
        lines += [
            _line("✨", "Reserved meta:", f"{status} - {meta_hex}"),
            _line("🎁", "Metadata version:", f"V{self.metadata_version}"),
            _line("🔥", "Core version:", str(self.core_version)),
            _line("🗳️ ", "system.setCode hash:", self.proposal_hash),
            _line("🗳️ ", "authorizeUpgrade hash:", self.parachain_authorize_upgrade_hash),
            _line("🗳️ ", "Blake2-256 hash:", self.blake2_256),
            _line("📦", "IPFS:", f"https://www.ipfs.io/ipfs/{self.ipfs_hash}"),
        ]
        return "".join(f"{line}\n" for line in lines)

    def render_version(self) -> str:
        """The four version lines of the runtime."""
        cv = self.core_version
        return (
            f"specifications : {cv.spec_name} v{cv.spec_version}\n"
            f"implementation : {cv.impl_name} v{cv.impl_version}\n"
            f"transaction    : v{cv.transaction_version}\n"
            f"authoring      : v{cv.authoring_version}"
        )

    def print(self, json: bool = False) -> None:
        """Print the summary, as JSON if asked."""
        if json:
            print(jsonlib.dumps(self.to_dict(), indent=2))
        else:
            print(self.render())

    def print_version(self, json: bool = False) -> None:
        """Print the core version, as JSON if asked."""
        if json:
            print(jsonlib.dumps(self.core_version.to_dict(), indent=2))
        else:
            print(self.render_version())
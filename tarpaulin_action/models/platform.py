"""Target platform identification for release assets."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class PlatformId:
    """Target platform an asset was built for, in target-triple form."""

    arch: str
    vendor: str
    os: str
    libc: str

    @property
    def signature(self) -> str:
        """Target triple as it appears in release asset file names."""
        return f"{self.arch}-{self.vendor}-{self.os}-{self.libc}"


# Hosted CI runners only ship this flavour of tarpaulin binaries.
LINUX_X86_64_GNU = PlatformId(arch="x86_64", vendor="unknown", os="linux", libc="gnu")

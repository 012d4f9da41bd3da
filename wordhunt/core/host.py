from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import parse_qs

WEB_PLATFORMS = frozenset({"wasm"})
HEADLESS_PLATFORMS = frozenset({"offscreen", "minimal"})

DEVTOOLS_PARAM = "devtools"


@dataclass(frozen=True)
class HostCapabilities:
    """What the host can do, decided once at startup."""

    platform: str
    is_web: bool
    native_dialogs: bool

    @classmethod
    def from_platform_name(cls, name: str) -> "HostCapabilities":
        platform = (name or "").strip().lower()
        is_web = platform in WEB_PLATFORMS
        native = not is_web and platform not in HEADLESS_PLATFORMS
        return cls(platform=platform, is_web=is_web, native_dialogs=native)


def devtools_requested(query: str, capabilities: HostCapabilities) -> bool:
    """True when a web host was opened with ``?devtools=true``."""
    if not capabilities.is_web or not query:
        return False
    params = parse_qs(query.lstrip("?"))
    values = params.get(DEVTOOLS_PARAM, [])
    return bool(values) and values[0].strip().lower() == "true"

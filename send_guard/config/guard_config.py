# config/guard_config.py

"""
Compiled-in guard configuration.

The internal domain and the risky extension list are fixed at build time.
A single GuardConfig instance is created once and handed to the scanner and
the gate at construction; nothing mutates it at run time.
"""

from dataclasses import dataclass, field, replace
from typing import FrozenSet, Optional

RISKY_EXTENSIONS: FrozenSet[str] = frozenset({
    # images
    ".jpg", ".jpeg", ".png", ".gif", ".bmp", ".tiff",
    # video
    ".mp4", ".mov", ".avi", ".mkv", ".webm",
    # archives
    ".zip", ".rar", ".7z", ".gz", ".tgz",
})


@dataclass(frozen=True)
class GuardConfig:
    """
    Immutable settings shared by every send attempt.

    Attributes:
        internal_domain: Links containing this string are not reported as external
        risky_extensions: Lower-cased dotted extensions that cannot be scanned
        max_displayed_links: How many links the warning text lists before truncating
        dialog_base_url: Location the confirmation page is served from
        dialog_page: Confirmation page file name under dialog_base_url
        dialog_height: Dialog height as a percentage of the host window
        dialog_width: Dialog width as a percentage of the host window
        display_in_iframe: Whether the host should render the dialog inline
        confirmation_timeout: Seconds to wait for a verdict; None waits forever
    """
    internal_domain: str = "innobothealth.com"
    risky_extensions: FrozenSet[str] = field(default_factory=lambda: RISKY_EXTENSIONS)
    max_displayed_links: int = 8
    dialog_base_url: str = "https://localhost:3000/send-guard"
    dialog_page: str = "modal.html"
    dialog_height: int = 50
    dialog_width: int = 50
    display_in_iframe: bool = True
    confirmation_timeout: Optional[float] = None

    def __post_init__(self):
        # Callers may pass any iterable; keep the stored value hashable and normalized
        extensions = frozenset(ext.lower() for ext in self.risky_extensions)
        object.__setattr__(self, "risky_extensions", extensions)
        if self.max_displayed_links < 1:
            raise ValueError("max_displayed_links must be at least 1")
        if self.confirmation_timeout is not None and self.confirmation_timeout <= 0:
            raise ValueError("confirmation_timeout must be positive when set")

    def with_overrides(self, **changes) -> "GuardConfig":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)


DEFAULT_GUARD_CONFIG = GuardConfig()

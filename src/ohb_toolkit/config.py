"""
OHB Toolkit - global configuration as a dataclass.
"""
from dataclasses import dataclass
from pathlib import Path


@dataclass
class ToolkitConfig:
    """Configuration shared by every step of the toolkit."""

    # === PATHS ===
    data_dir: Path = Path("data")
    source_dir: Path = Path("source")
    edition: str = "openscriptures-OHB"

    # === DOWNLOAD ===
    base_url: str = (
        "https://raw.githubusercontent.com/openscriptures/morphhb/"
        "refs/heads/master/wlc/"
    )
    user_agent: str = "ohb-toolkit/0.1.0"
    request_timeout: int = 30

    # === TEXT POLICY ===
    strip_cantillation: bool = False
    gematria: bool = True

    # --- Derived paths ---

    @property
    def edition_dir(self) -> Path:
        return self.data_dir / self.edition

    @property
    def cache_dir(self) -> Path:
        return self.data_dir / "cache"

    @property
    def metadata_path(self) -> Path:
        return self.edition_dir / "metadata.json"

    def ensure_dirs(self) -> None:
        """Create every directory the importer writes into."""
        for d in [self.source_dir, self.edition_dir, self.cache_dir]:
            d.mkdir(parents=True, exist_ok=True)

    @classmethod
    def from_overrides(cls, **kwargs) -> "ToolkitConfig":
        """Build a config ignoring None values (for Click integration)."""
        filtered = {k: v for k, v in kwargs.items() if v is not None}
        return cls(**filtered)

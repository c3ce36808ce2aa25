"""Configuration handling for the Gopher client."""

from dataclasses import dataclass, field
from pathlib import Path
import yaml

DEFAULT_RC_FILES = (
    "/etc/delve.conf",
    "/usr/local/etc/delve.conf",
    "~/.delve.conf",
    "delve.conf",
)


@dataclass
class Config:
    """Configuration settings for the Gopher client.

    Attributes:
        timeout_seconds: Socket timeout, None to block until the server closes.
        max_nesting: Maximum alias expansion depth.
        rc_files: Command files evaluated at startup, in order.
        page_lines: Lines per page when showing text documents.
        page_width: Columns per line when showing text documents.
        home: Locator opened at startup when no URL is given.
    """

    timeout_seconds: float | None = None
    max_nesting: int = 10
    rc_files: list[str] = field(default_factory=lambda: list(DEFAULT_RC_FILES))
    page_lines: int = 24
    page_width: int = 80
    home: str | None = None

    def get_rc_paths(self) -> list[Path]:
        """Get rc files as expanded Path objects."""
        return [Path(name).expanduser() for name in self.rc_files]

    def validate(self) -> None:
        """
        Check types and ranges of all settings.

        Raises:
            ValueError: Naming the first invalid setting.
        """
        timeout = self.timeout_seconds
        if timeout is not None and (not _is_number(timeout) or timeout <= 0):
            raise ValueError(f"network.timeout_seconds must be a positive number, got {timeout!r}")

        for name, value in (
            ("interpreter.max_nesting", self.max_nesting),
            ("pager.lines", self.page_lines),
            ("pager.width", self.page_width),
        ):
            if not _is_int(value) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")

        if not isinstance(self.rc_files, list) or not all(isinstance(n, str) for n in self.rc_files):
            raise ValueError(f"interpreter.rc_files must be a list of file names, got {self.rc_files!r}")

        if self.home is not None and not isinstance(self.home, str):
            raise ValueError(f"home must be a gopher URL, got {self.home!r}")


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value) -> bool:
    return _is_int(value) or isinstance(value, float)


def load_config(path: str | Path) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        Config object with loaded values.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If a setting has the wrong type or is out of range.
    """
    config_path = Path(path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping of settings")

    # Extract sections
    network = _section(data, "network")
    interpreter = _section(data, "interpreter")
    pager = _section(data, "pager")

    defaults = Config()
    config = Config(
        timeout_seconds=network.get("timeout_seconds", defaults.timeout_seconds),
        max_nesting=interpreter.get("max_nesting", defaults.max_nesting),
        rc_files=interpreter.get("rc_files", defaults.rc_files),
        page_lines=pager.get("lines", defaults.page_lines),
        page_width=pager.get("width", defaults.page_width),
        home=data.get("home", defaults.home),
    )
    config.validate()
    return config


def _section(data: dict, name: str) -> dict:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ValueError(f"{name} must be a mapping, got {section!r}")
    return section

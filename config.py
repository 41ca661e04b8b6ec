"""Configuration management for banksim.

Reads configuration from ~/.config/banksim.toml and creates default config if needed.
"""

from pathlib import Path
from dataclasses import dataclass
import tomllib
import tomli_w

DEFAULT_RECEIPT_FILENAME = "ticket_cuenta1.txt"


@dataclass
class Config:
    """Application configuration."""

    base_dir: Path
    log_level: str
    log_dir: Path
    receipt_dir: Path
    receipt_filename: str

    @classmethod
    def default(cls) -> "Config":
        """Create a Config with default values."""
        base_dir = Path.home() / "data" / "banksim"
        return cls(
            base_dir=base_dir,
            log_level="INFO",
            log_dir=base_dir / "logs",
            receipt_dir=base_dir / "receipts",
            receipt_filename=DEFAULT_RECEIPT_FILENAME,
        )


def get_config_path() -> Path:
    """Get the path to the config file."""
    return Path.home() / ".config" / "banksim.toml"


def load_config() -> Config:
    """Load configuration from file, creating default if it doesn't exist.

    Returns:
        Config object with loaded or default values.
    """
    config_path = get_config_path()

    # If config doesn't exist, create it with defaults
    if not config_path.exists():
        config = Config.default()
        _write_config(config)
        return config

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    # Parse with defaults for any missing values
    base_dir = Path(data.get("base_dir", Path.home() / "data" / "banksim"))

    log_config = data.get("logging", {})
    log_level = log_config.get("level", "INFO")
    log_dir = Path(log_config.get("log_dir", base_dir / "logs"))

    receipt_config = data.get("receipts", {})
    receipt_dir = Path(receipt_config.get("receipt_dir", base_dir / "receipts"))
    receipt_filename = receipt_config.get("filename", DEFAULT_RECEIPT_FILENAME)

    return Config(
        base_dir=base_dir,
        log_level=log_level,
        log_dir=log_dir,
        receipt_dir=receipt_dir,
        receipt_filename=receipt_filename,
    )


def _write_config(config: Config) -> None:
    """Write config to the config file.

    Args:
        config: Config object to write.
    """
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "base_dir": str(config.base_dir),
        "logging": {
            "level": config.log_level,
            "log_dir": str(config.log_dir),
        },
        "receipts": {
            "receipt_dir": str(config.receipt_dir),
            "filename": config.receipt_filename,
        },
    }

    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)

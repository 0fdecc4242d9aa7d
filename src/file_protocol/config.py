"""Configuration handling for the file protocol."""

from dataclasses import dataclass
from pathlib import Path
import yaml


@dataclass
class Config:
    """Configuration settings for file fetching.

    Attributes:
        encoding: Character encoding used to decode locator paths.
        crawl_parent: Whether directory listings link to the parent directory.
    """

    encoding: str = "UTF-8"
    crawl_parent: bool = True


def load_config(path: str | Path) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        Config object with loaded values.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If crawl_parent is not a boolean.
    """
    config_path = Path(path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    section = data.get("file", {}) or {}

    crawl_parent = section.get("crawl_parent", Config.crawl_parent)
    if not isinstance(crawl_parent, bool):
        raise ValueError(f"file.crawl_parent must be true or false, got {crawl_parent!r}")

    return Config(
        encoding=str(section.get("encoding", Config.encoding)),
        crawl_parent=crawl_parent,
    )

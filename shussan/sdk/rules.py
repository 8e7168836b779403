"""Rules loading.

Domain data (remuneration grades, premium rates, tax tables, validation
limits) lives in rules/<year>.yaml. Files are parsed once, validated into
frozen Rules objects, and cached for the life of the process.

Rules directory resolution:
1. settings.json "rules_dir" (if set and present)
2. rules/ directory shipped inside the package
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

import yaml

from .config import get_setting
from .schemas import Rules, ShussanError

logger = logging.getLogger(__name__)


class RulesNotFoundError(ShussanError, FileNotFoundError):
    """Raised when no rules file exists for the requested year."""
    pass


def get_builtin_rules_dir() -> Path:
    """Get the rules directory shipped with the package."""
    return Path(__file__).parent.parent / "rules"  # sdk -> shussan


def get_rules_dir() -> Path:
    """Get the active rules directory (custom rules_dir setting or built-in)."""
    custom = get_setting("rules_dir")
    if custom:
        custom_path = Path(custom).expanduser()
        if custom_path.is_dir():
            return custom_path
        logger.warning(f"rules_dir setting points to missing directory {custom_path}; using built-in rules")
    return get_builtin_rules_dir()


def get_available_years(rules_dir: Optional[Path] = None) -> list[int]:
    """Get sorted list of available rules years (descending)."""
    rules_dir = rules_dir or get_rules_dir()
    years = [int(p.stem) for p in rules_dir.glob("*.yaml") if p.stem.isdigit()]
    return sorted(years, reverse=True)


def resolve_year(year: Optional[Union[int, str]] = None, rules_dir: Optional[Path] = None) -> int:
    """Resolve the rules year: explicit value, then rules_year setting, then newest file."""
    if year is None:
        year = get_setting("rules_year")
    if year is not None:
        return int(year)

    available = get_available_years(rules_dir)
    if not available:
        raise RulesNotFoundError(f"No rules files found in {rules_dir or get_rules_dir()}")
    return available[0]


@lru_cache(maxsize=None)
def _load_rules_file(config_file: Path, year: int) -> Rules:
    with open(config_file, "r") as f:
        data = yaml.safe_load(f) or {}
    logger.debug(f"Loaded rules {year} from {config_file}")
    return Rules.model_validate({**data, "year": year})


def load_rules(year: Optional[Union[int, str]] = None) -> Rules:
    """Load rules for a year from rules/YYYY.yaml.

    Args:
        year: Rules year. None uses the rules_year setting, else the newest file.

    Returns:
        Frozen Rules object (cached per file)

    Raises:
        RulesNotFoundError: If the rules file does not exist
        pydantic.ValidationError: If the rules file is malformed
    """
    rules_dir = get_rules_dir()
    target_year = resolve_year(year, rules_dir)
    config_file = rules_dir / f"{target_year}.yaml"
    if not config_file.exists():
        raise RulesNotFoundError(f"Rules file not found for year {target_year}: {config_file}")

    return _load_rules_file(config_file.resolve(), target_year)


def clear_rules_cache() -> None:
    """Drop cached rules (after editing a rules file or switching rules_dir)."""
    _load_rules_file.cache_clear()


def load_builtin_rules() -> Rules:
    """Load the newest rules file shipped with the package, ignoring settings."""
    rules_dir = get_builtin_rules_dir()
    available = get_available_years(rules_dir)
    if not available:
        raise RulesNotFoundError(f"No rules files found in {rules_dir}")
    year = available[0]
    return _load_rules_file((rules_dir / f"{year}.yaml").resolve(), year)

"""Cache-Control policy functions

A cache policy is a plain callable taking the local file path and returning
the full header line, e.g. ``"Cache-Control: max-age=1"``. The header line is
what gets stored in the manifest, so changing a policy redeploys the files
it affects.
"""

import importlib
import logging
from typing import Callable, List, Optional, Tuple, Union
from pathlib import Path

from ..api.exceptions import ConfigError
from ..constants import (
    CACHE_CONTROL_HEADER,
    DEFAULT_SHORT_MAX_AGE,
    DEFAULT_LONG_MAX_AGE,
    SHORT_LIVED_EXTENSIONS,
)
from ..models.config import CacheControlConfig, CacheRule
from ..utils.file_utils import matches_any

logger = logging.getLogger(__name__)

CachePolicy = Callable[[str], str]


def cache_header(max_age: int) -> str:
    """Header line for a max-age policy"""
    return f"{CACHE_CONTROL_HEADER}: max-age={max_age}"


def parse_header_line(header: str) -> Tuple[str, str]:
    """Split a header line into name and value

    A bare value without a name is taken as a Cache-Control value.
    """
    name, sep, value = header.partition(":")
    if not sep:
        return CACHE_CONTROL_HEADER, header.strip()
    return name.strip(), value.strip()


def is_short_lived(file_path: Union[str, Path]) -> bool:
    """Markup and plain-text files change often"""
    return str(file_path).endswith(SHORT_LIVED_EXTENSIONS)


def make_default_policy(short_max_age: int = DEFAULT_SHORT_MAX_AGE,
                        long_max_age: int = DEFAULT_LONG_MAX_AGE) -> CachePolicy:
    """Build the built-in policy with custom max ages"""
    short_header = cache_header(short_max_age)
    long_header = cache_header(long_max_age)

    def policy(file_path: str) -> str:
        # html pages and robots/sitemap get short caching; other assets are
        # expected to carry a content hash in their file name
        return short_header if is_short_lived(file_path) else long_header

    return policy


default_cache_policy = make_default_policy()


def make_rule_policy(rules: List[CacheRule],
                     fallback: CachePolicy,
                     source_root: Optional[Path] = None) -> CachePolicy:
    """Build a policy from glob rules; first match wins

    Patterns are matched against the path relative to source_root, so
    ``assets/*.js`` matches however the files were discovered.
    """
    rules = list(rules)

    def policy(file_path: str) -> str:
        path = Path(file_path)
        if source_root is not None and source_root in path.parents:
            path = path.relative_to(source_root)
        relative = path.as_posix()
        for rule in rules:
            if matches_any(relative, [rule.pattern]):
                return rule.header
        return fallback(file_path)

    return policy


def load_policy_function(import_string: str) -> CachePolicy:
    """Import a policy callable from ``package.module:function``

    Raises:
        ConfigError: If the string is malformed or the target is not callable
    """
    module_name, sep, attr = import_string.partition(":")
    if not sep or not module_name or not attr:
        raise ConfigError(
            f"Invalid cache policy function '{import_string}', "
            "expected 'package.module:function'"
        )

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigError(f"Failed to import cache policy module {module_name}: {e}")

    func = module
    for part in attr.split("."):
        func = getattr(func, part, None)
        if func is None:
            raise ConfigError(f"Cache policy function not found: {import_string}")

    if not callable(func):
        raise ConfigError(f"Cache policy is not callable: {import_string}")

    logger.debug(f"Loaded cache policy function {import_string}")
    return func


def build_cache_policy(config: Optional[CacheControlConfig],
                       source_root: Optional[Path] = None) -> CachePolicy:
    """Create the policy described by configuration

    A user function receives the local file path unchanged.

    Args:
        config: Cache-Control settings
        source_root: Site directory glob rules are relative to
    """
    if config is None:
        return default_cache_policy

    if config.function:
        return load_policy_function(config.function)

    policy = make_default_policy(config.short_max_age, config.long_max_age)
    if config.rules:
        policy = make_rule_policy(config.rules, policy, source_root)
    return policy

"""
Configuration file support for graphenum CLI.

Supports YAML and JSON config files with CLI argument override.

Example config:

    input: graph.txt
    output: results/cliques.csv
    cliques:
      min_size: 3
      limit: 1000
    match:
      limit: 10
"""

import json
from argparse import Namespace
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

# Top-level keys mirror the CLI path arguments; sections hold per-command settings
_PATH_KEYS = ('input', 'output', 'pattern', 'data', 'pattern_labels', 'data_labels')

_SECTION_KEYS = {
    'cliques': ('min_size', 'limit'),
    'match': ('limit',),
}

_SHORT_TO_LONG = {
    'i': 'input',
    'o': 'output',
    'p': 'pattern',
    'd': 'data',
    'c': 'config',
}


def load_config(config_path: Path) -> Dict[str, Any]:
    """
    Load configuration from YAML or JSON file.

    Parameters:
        config_path: Path to config file (.yaml, .yml, or .json)

    Returns:
        Dictionary with configuration values

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If file format is unsupported or invalid

    Examples:
        >>> config = load_config(Path("cliques.yaml"))
        >>> print(config['cliques']['min_size'])
        3
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    suffix = config_path.suffix.lower()

    try:
        with open(config_path, 'r') as f:
            if suffix in ('.yaml', '.yml'):
                config = yaml.safe_load(f)
            elif suffix == '.json':
                config = json.load(f)
            else:
                raise ValueError(
                    f"Unsupported config format: {suffix}. "
                    f"Use .yaml, .yml, or .json"
                )
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config file: {e}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file: {e}")

    if config is None:
        return {}

    if not isinstance(config, dict):
        raise ValueError("Config file must contain a dictionary/mapping at top level")

    return config


def _merge_value(cli_value: Any, config_value: Any, was_explicitly_set: bool) -> Any:
    """
    Merge a single config value with CLI argument.

    Rules:
    - CLI args ALWAYS override config if explicitly set
    - If CLI arg not set, use config value
    - If neither set, keep CLI default
    """
    if was_explicitly_set:
        return cli_value

    if config_value is not None:
        return config_value

    return cli_value


def _explicit_arg_names(cli_args: Optional[List[str]]) -> set:
    explicit_args = set()
    for arg in cli_args or []:
        if arg.startswith('--'):
            explicit_args.add(arg[2:].split('=', 1)[0].replace('-', '_'))
        elif arg.startswith('-') and len(arg) == 2 and arg[1] in _SHORT_TO_LONG:
            explicit_args.add(_SHORT_TO_LONG[arg[1]])
    return explicit_args


def merge_config_with_args(config: Dict[str, Any], args: Namespace, cli_args: Optional[List[str]] = None) -> Namespace:
    """
    Merge config file values with CLI arguments.

    Priority (highest to lowest):
    1. Explicitly provided CLI arguments
    2. Config file values
    3. CLI argument defaults

    Only attributes the subcommand actually defines are merged, so one config
    file can carry settings for several commands.

    Parameters:
        config: Configuration dictionary from load_config()
        args: Parsed CLI arguments (argparse.Namespace)
        cli_args: Raw CLI arguments list (for detecting explicit values)
                  If None, assumes all args are defaults

    Returns:
        Updated Namespace with merged values
    """
    explicit_args = _explicit_arg_names(cli_args)
    merged = Namespace(**vars(args))

    for key in _PATH_KEYS:
        if key in config and hasattr(merged, key):
            config_value = config[key]
            if config_value is not None:
                config_value = Path(config_value)
            setattr(merged, key, _merge_value(getattr(merged, key), config_value, key in explicit_args))

    command = getattr(merged, 'command', None)
    section = config.get(command) if command in _SECTION_KEYS else None
    if section:
        for key in _SECTION_KEYS[command]:
            if key in section and hasattr(merged, key):
                setattr(merged, key, _merge_value(getattr(merged, key), section[key], key in explicit_args))

    return merged


def validate_config(config: Dict[str, Any]) -> None:
    """
    Validate configuration structure and values.

    Raises:
        ValueError: If configuration is invalid
    """
    for name, keys in _SECTION_KEYS.items():
        if name not in config:
            continue
        section = config[name]
        if not isinstance(section, dict):
            raise ValueError(f"Config section '{name}' must be a mapping")
        unknown = set(section) - set(keys)
        if unknown:
            raise ValueError(
                f"Unknown keys in config section '{name}': {', '.join(sorted(unknown))}"
            )
        for key in keys:
            value = section.get(key)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(
                    f"{name}.{key} must be a positive integer, got: {value}"
                )

    for key in _PATH_KEYS:
        value = config.get(key)
        if value is not None and not isinstance(value, str):
            raise ValueError(f"'{key}' must be a path string, got: {value!r}")


def apply_config(args: Namespace) -> Namespace:
    """
    Load, validate and merge ``args.config`` into ``args`` if a config was given.

    Raises:
        FileNotFoundError: If the config file doesn't exist
        ValueError: If the config file is malformed or invalid
    """
    if not getattr(args, 'config', None):
        return args
    config = load_config(args.config)
    validate_config(config)
    return merge_config_with_args(config, args, getattr(args, 'cli_args', None))

"""
Configuration file support for the grnscore CLI.

Supports YAML and JSON config files with CLI argument override. A config
file is convenient when the same gold standard is used to score many
predictions:

    # dream4_size10.yaml
    gold: gold/DREAM4_GoldStandard_InSilico_Size10_1.tsv
    output_dir: results/size10
    metrics: [PR, ROC]
    plot: true
"""

import json
from argparse import Namespace
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from grnscore.exceptions import ConfigurationError

VALID_METRICS = ('PR', 'ROC')


@dataclass
class ConfigSchema:
    """
    Complete configuration schema for a grnscore run.

    Mirrors the CLI argument structure for consistency.
    """
    pred: Optional[Path] = None
    gold: Optional[Path] = None
    output_dir: Optional[Path] = None
    prefix: Optional[str] = None
    metrics: List[str] = field(default_factory=lambda: list(VALID_METRICS))
    motifs: bool = False
    motifs_output: Optional[Path] = None
    sort_by_score: bool = False
    plot: bool = False
    json: Optional[Path] = None


KNOWN_KEYS = frozenset(ConfigSchema.__dataclass_fields__)
PATH_KEYS = frozenset({'pred', 'gold', 'output_dir', 'motifs_output', 'json'})
BOOL_KEYS = frozenset({'motifs', 'sort_by_score', 'plot'})

# Flags whose presence on the command line sets the given config key
FLAG_TO_KEY = {
    'pred': 'pred',
    'gold': 'gold',
    'output_dir': 'output_dir',
    'prefix': 'prefix',
    'PR': 'metrics',
    'ROC': 'metrics',
    'motifs': 'metrics',
    'motifs_output': 'motifs_output',
    'sort_by_score': 'sort_by_score',
    'plot': 'plot',
    'json': 'json',
}


def load_config(config_path: Path) -> Dict[str, Any]:
    """
    Load configuration from YAML or JSON file.

    Parameters:
        config_path: Path to config file (.yaml, .yml, or .json)

    Returns:
        Dictionary with configuration values

    Raises:
        ConfigurationError: If the file is missing, its format is
            unsupported, or it does not contain a mapping

    Examples:
        >>> config = load_config(Path("dream4_size10.yaml"))
        >>> print(config['metrics'])
        ['PR', 'ROC']
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise ConfigurationError(f"Config file not found: {config_path}")

    suffix = config_path.suffix.lower()
    if suffix not in ('.yaml', '.yml', '.json'):
        raise ConfigurationError(
            f"Unsupported config format: {suffix}. "
            f"Use .yaml, .yml, or .json"
        )

    try:
        with open(config_path, 'r') as f:
            if suffix in ('.yaml', '.yml'):
                config = yaml.safe_load(f)
            else:
                config = json.load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in config file: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in config file: {e}") from e

    if config is None:
        return {}

    if not isinstance(config, dict):
        raise ConfigurationError("Config file must contain a dictionary/mapping at top level")

    return config


def validate_config(config: Dict[str, Any]) -> None:
    """
    Validate configuration keys and value types.

    Raises:
        ConfigurationError: On unknown keys, unknown metrics, non-boolean
            switches, or motif analysis combined with PR/ROC metrics
    """
    unknown = set(config) - KNOWN_KEYS
    if unknown:
        raise ConfigurationError(
            f"Unknown config keys: {', '.join(sorted(unknown))}. "
            f"Choose from: {', '.join(sorted(KNOWN_KEYS))}"
        )

    if 'metrics' in config:
        metrics = config['metrics']
        if isinstance(metrics, str):
            metrics = [metrics]
        if not isinstance(metrics, list):
            raise ConfigurationError(f"metrics must be a list, got: {metrics!r}")
        invalid = [m for m in metrics if m not in VALID_METRICS]
        if invalid:
            raise ConfigurationError(
                f"Invalid metrics {invalid}. Choose from: {', '.join(VALID_METRICS)}"
            )

    for key in BOOL_KEYS & set(config):
        if not isinstance(config[key], bool):
            raise ConfigurationError(f"{key} must be true or false, got: {config[key]!r}")

    if config.get('motifs') and config.get('metrics'):
        raise ConfigurationError(
            "A config file cannot request both motif analysis and PR/ROC metrics"
        )


def _explicit_keys(cli_args: Optional[List[str]]) -> set:
    """Config keys that were set explicitly on the command line."""
    explicit = set()
    for arg in cli_args or []:
        if arg == '-o' or arg.startswith('-o='):
            explicit.add('output_dir')
            continue
        if not arg.startswith('--'):
            continue
        flag = arg[2:].split('=', 1)[0].replace('-', '_')
        if flag in FLAG_TO_KEY:
            explicit.add(FLAG_TO_KEY[flag])
    return explicit


def merge_config_with_args(
    config: Dict[str, Any],
    args: Namespace,
    cli_args: Optional[List[str]] = None,
) -> Namespace:
    """
    Merge config file values with CLI arguments.

    Priority (highest to lowest):
    1. Explicitly provided CLI arguments
    2. Config file values
    3. CLI argument defaults

    Parameters:
        config: Configuration dictionary from load_config()
        args: Parsed CLI arguments (argparse.Namespace)
        cli_args: Raw CLI arguments list (for detecting explicit values).
                  If None, assumes all args are defaults

    Returns:
        Updated Namespace with merged values
    """
    explicit = _explicit_keys(cli_args)
    merged = Namespace(**vars(args))

    for key, value in config.items():
        if key in explicit or value is None:
            continue

        if key in PATH_KEYS:
            setattr(merged, key, Path(value))
        elif key == 'metrics':
            metrics = [value] if isinstance(value, str) else list(value)
            merged.PR = 'PR' in metrics
            merged.ROC = 'ROC' in metrics
        elif key == 'motifs':
            if 'metrics' not in explicit:
                merged.motifs = value
        else:
            setattr(merged, key, value)

    return merged

# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Configuration module for the puzzle loader.

Handles loading configuration from YAML files and command-line arguments,
with proper merging and validation.
"""

import argparse
from pathlib import Path
from dataclasses import dataclass, field, asdict
from typing import Optional, List, Dict, Any

import yaml

from crossword_formatter import is_text_encoding


DEFAULT_ENCODING = "UTF-8"

# Valid configuration values
VALID_INPUT_FORMATS = ["wsj"]
VALID_OUTPUT_FORMATS = ["summary", "yaml"]
VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


@dataclass
class InputConfig:
    """Configuration for reading puzzle files."""
    encoding: str = DEFAULT_ENCODING
    format: str = "wsj"


@dataclass
class OutputConfig:
    """Configuration for output."""
    format: str = "summary"
    directory: Optional[str] = None


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    level: str = "INFO"
    directory: Optional[str] = None
    enable_console: bool = True


@dataclass
class LoaderConfig:
    """Complete configuration for loading puzzles."""
    input: InputConfig = field(default_factory=InputConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def __post_init__(self):
        """Convert dicts to dataclass instances if needed."""
        if isinstance(self.input, dict):
            self.input = InputConfig(**self.input)
        if isinstance(self.output, dict):
            self.output = OutputConfig(**self.output)
        if isinstance(self.logging, dict):
            self.logging = LoggingConfig(**self.logging)

    @classmethod
    def from_yaml(cls, path: str) -> 'LoaderConfig':
        """
        Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            LoaderConfig instance

        Raises:
            ConfigValidationError: If file doesn't exist or is invalid
        """
        path = Path(path)
        if not path.exists():
            raise ConfigValidationError(f"Configuration file not found: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigValidationError(f"Invalid YAML in {path}: {e}")

        if not isinstance(data, dict):
            raise ConfigValidationError(
                f"Configuration file must contain a YAML mapping, got {type(data)}"
            )

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> 'LoaderConfig':
        """Create LoaderConfig from dictionary."""
        config = cls()

        if 'input' in data:
            in_data = data['input'] or {}
            config.input = InputConfig(
                encoding=in_data.get('encoding', config.input.encoding),
                format=in_data.get('format', config.input.format),
            )

        if 'output' in data:
            out_data = data['output'] or {}
            config.output = OutputConfig(
                format=out_data.get('format', config.output.format),
                directory=out_data.get('directory', config.output.directory),
            )

        if 'logging' in data:
            log_data = data['logging'] or {}
            config.logging = LoggingConfig(
                level=log_data.get('level', config.logging.level),
                directory=log_data.get('directory', config.logging.directory),
                enable_console=log_data.get(
                    'enable_console', config.logging.enable_console
                ),
            )

        return config

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> 'LoaderConfig':
        """
        Create configuration from command-line arguments.

        Args:
            args: Parsed command-line arguments

        Returns:
            LoaderConfig instance
        """
        config = cls()

        if getattr(args, 'encoding', None):
            config.input.encoding = args.encoding
        if getattr(args, 'input_format', None):
            config.input.format = args.input_format
        if getattr(args, 'format', None):
            config.output.format = args.format
        if getattr(args, 'output', None):
            config.output.directory = args.output
        if getattr(args, 'log_dir', None):
            config.logging.directory = args.log_dir
        if getattr(args, 'verbose', False):
            config.logging.level = "DEBUG"

        return config

    @classmethod
    def merge(
        cls,
        yaml_config: 'LoaderConfig',
        cli_config: 'LoaderConfig'
    ) -> 'LoaderConfig':
        """
        Merge configurations with CLI taking precedence over YAML.

        Args:
            yaml_config: Configuration loaded from YAML file
            cli_config: Configuration from command-line arguments

        Returns:
            Merged LoaderConfig instance
        """
        merged = cls(
            input=InputConfig(**asdict(yaml_config.input)),
            output=OutputConfig(**asdict(yaml_config.output)),
            logging=LoggingConfig(**asdict(yaml_config.logging)),
        )

        # Override with CLI values (non-default values)
        default = cls()

        if cli_config.input.encoding != default.input.encoding:
            merged.input.encoding = cli_config.input.encoding
        if cli_config.input.format != default.input.format:
            merged.input.format = cli_config.input.format
        if cli_config.output.format != default.output.format:
            merged.output.format = cli_config.output.format
        if cli_config.output.directory:
            merged.output.directory = cli_config.output.directory
        if cli_config.logging.level != default.logging.level:
            merged.logging.level = cli_config.logging.level
        if cli_config.logging.directory:
            merged.logging.directory = cli_config.logging.directory

        return merged

    def validate(self) -> List[str]:
        """
        Validate configuration values.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        # Validate encoding
        if not is_text_encoding(self.input.encoding):
            errors.append(f"Unknown encoding '{self.input.encoding}'")

        if self.input.format not in VALID_INPUT_FORMATS:
            errors.append(
                f"Invalid input format '{self.input.format}'. "
                f"Must be one of: {VALID_INPUT_FORMATS}"
            )

        if self.output.format not in VALID_OUTPUT_FORMATS:
            errors.append(
                f"Invalid output format '{self.output.format}'. "
                f"Must be one of: {VALID_OUTPUT_FORMATS}"
            )

        if self.output.format == "yaml" and not self.output.directory:
            errors.append("YAML output requires an output directory")

        if str(self.logging.level).upper() not in VALID_LOG_LEVELS:
            errors.append(
                f"Invalid log level '{self.logging.level}'. "
                f"Must be one of: {VALID_LOG_LEVELS}"
            )

        return errors

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'input': asdict(self.input),
            'output': asdict(self.output),
            'logging': asdict(self.logging),
        }


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="wsj-crossword",
        description="Load WSJ JSON crossword puzzles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print a summary of a puzzle
  wsj-crossword data.json

  # Export puzzles to YAML
  wsj-crossword --format yaml --output ./out puzzles/*.json

  # CLI arguments override YAML
  wsj-crossword --config loader.yaml --encoding latin-1 data.json
"""
    )

    parser.add_argument(
        "files",
        nargs="+",
        metavar="FILE",
        help="Puzzle file(s) to load"
    )

    # Configuration file
    parser.add_argument(
        "--config", "-c",
        metavar="PATH",
        help="YAML configuration file"
    )

    # Input settings
    parser.add_argument(
        "--encoding", "-e",
        metavar="ENCODING",
        help=f"Text encoding of puzzle files (default: {DEFAULT_ENCODING})"
    )
    parser.add_argument(
        "--input-format",
        choices=VALID_INPUT_FORMATS,
        help="Puzzle source format (default: wsj)"
    )

    # Output settings
    parser.add_argument(
        "--format", "-f",
        choices=VALID_OUTPUT_FORMATS,
        help="Output format (default: summary)"
    )
    parser.add_argument(
        "--output", "-o",
        metavar="PATH",
        help="Output directory for exported files"
    )

    # Logging
    parser.add_argument(
        "--log-dir",
        metavar="PATH",
        help="Write a log file to this directory"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    return parser


def load_config(args: argparse.Namespace) -> LoaderConfig:
    """
    Load configuration from command-line and/or YAML file.

    Args:
        args: Parsed command-line arguments

    Returns:
        Fully resolved LoaderConfig

    Raises:
        ConfigValidationError: If configuration is invalid
    """
    yaml_config = None
    if getattr(args, 'config', None):
        yaml_config = LoaderConfig.from_yaml(args.config)

    cli_config = LoaderConfig.from_args(args)

    if yaml_config:
        config = LoaderConfig.merge(yaml_config, cli_config)
    else:
        config = cli_config

    errors = config.validate()
    if errors:
        raise ConfigValidationError(
            "Configuration validation failed:\n" +
            "\n".join(f"  - {e}" for e in errors)
        )

    return config

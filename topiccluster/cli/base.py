"""Base classes and utilities for CLI commands."""

import argparse
from abc import ABC, abstractmethod
from typing import Any
from pathlib import Path

from ..config.constants import LOG_DEBUG, LOG_INFO, LOG_WARNING, LOG_ERROR
from ..utils.io import read_json, ensure_directory
from ..utils.logging import get_logger


class BaseCommand(ABC):
    """Base class for CLI commands."""
    
    def __init__(self, args: argparse.Namespace):
        self.args = args
        self.logger = get_logger(self.__class__.__name__)
    
    @abstractmethod
    def execute(self) -> None:
        """Execute the command."""
        pass
    
    def load_input(self, path: str) -> Any:
        """Load input data from JSON file."""
        self.logger.info(f"Loading input from {path}")
        return read_json(path)
    
    def ensure_output_dir(self, path: str) -> Path:
        """Ensure output directory exists."""
        return ensure_directory(path)


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Add common arguments to parser."""
    parser.add_argument(
        '--log-level',
        default=LOG_INFO,
        choices=[LOG_DEBUG, LOG_INFO, LOG_WARNING, LOG_ERROR],
        help='Logging level'
    )
    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Suppress output'
    )

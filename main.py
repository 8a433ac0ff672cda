#!/usr/bin/env python3
"""
Quiz Manager - Main Entry Point

This script seeds an in-memory quiz registry from config.json, prints the
answer-count summary, then prints the sample quiz questions.

Usage:
    python main.py

Configuration:
    config.json is optional. Its sections are:
    - "logging": level, log_directory, log_to_file
    - "registry": validate_categories, summary_separator
    - "quizzes": list of quiz objects to insert, in order
"""

import sys
import json
import logging
from pathlib import Path

from quiz_manager.config_manager import ConfigManager
from quiz_manager.data_manager import DataManager
from quiz_manager.registry import QuizRegistry
from quiz_manager.samples import print_sample_questions


def load_config(config_path: Path = Path("config.json")):
    """Load configuration from config.json file, or defaults if it is missing."""
    if not config_path.exists():
        print(f"ℹ️ {config_path} not found, using default settings")
        return {}

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config = json.load(f)
        return config
    except json.JSONDecodeError as e:
        print(f"❌ Error: Invalid JSON in {config_path}: {e}")
        sys.exit(1)
    except OSError as e:
        print(f"❌ Error loading {config_path}: {e}")
        sys.exit(1)


def setup_logging_from_config(config):
    """Set up logging based on configuration."""
    log_config = config.get('logging', {})
    log_level = getattr(logging, log_config.get('level', 'WARNING').upper())
    handlers = [logging.StreamHandler()]

    if log_config.get('log_to_file', False):
        log_directory = Path(log_config.get('log_directory', './logs/'))
        log_directory.mkdir(exist_ok=True)
        handlers.append(logging.FileHandler(log_directory / "quiz_manager.log", encoding='utf-8'))

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


def build_registry(config) -> QuizRegistry:
    """Create a registry from the config's settings and seed quizzes."""
    config_manager = ConfigManager()
    result = config_manager.load_from_dict(config)
    if not result['success']:
        print(f"⚠️ Ignored registry settings: {', '.join(result['rejected'])}")

    registry = QuizRegistry(config_manager.get_registry_settings())
    data_manager = DataManager(registry)
    data_manager.load_quizzes(config.get('quizzes', []))
    for error in data_manager.get_load_errors():
        print(f"⚠️ {error}")

    return registry


def main():
    config = load_config()
    setup_logging_from_config(config)

    registry = build_registry(config)
    summary = registry.summary_text()
    if summary:
        print(summary)

    print_sample_questions()


if __name__ == "__main__":
    main()

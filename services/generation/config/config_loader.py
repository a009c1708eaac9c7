"""
Configuration loader for the slide generation pipeline.
Handles loading and validation of the YAML model parameters.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from shared.utils import config as service_config

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "generation_config.yaml")


class GenerationConfig:
    """Per-operation model parameters for slide generation."""

    def __init__(self, config_path: str | None = None):
        if config_path is None:
            config_path = service_config.get("generation_config_path") or DEFAULT_CONFIG_PATH

        self.config_path = Path(config_path)
        self._config = self._load_config()

    def _load_config(self) -> dict[str, Any]:
        """Load configuration from YAML file."""
        try:
            with open(self.config_path, encoding="utf-8") as file:
                loaded = yaml.safe_load(file) or {}
                logger.info(f"Loaded generation configuration from {self.config_path}")
                return loaded
        except FileNotFoundError:
            logger.error(f"Configuration file not found: {self.config_path}")
            raise
        except yaml.YAMLError as e:
            logger.error(f"Error parsing YAML configuration: {e}")
            raise

    def get_ai_model_config(self, model_type: str = "primary") -> dict[str, Any]:
        models = self._config.get("ai_models", {})
        return models.get(model_type, models.get("primary", {}))

    def get_operations(self) -> list[str]:
        return list(self._config.get("operations", {}))

    def get_operation_config(self, operation: str) -> dict[str, Any]:
        """Model settings for an operation: primary model values overlaid with the operation's own."""
        merged = dict(self.get_ai_model_config("primary"))
        merged.update(self._config.get("operations", {}).get(operation) or {})
        return merged

    def validate_config(self) -> bool:
        """Validate the loaded configuration."""
        for section in ("ai_models", "operations"):
            if section not in self._config:
                logger.error(f"Missing required configuration section: {section}")
                return False

        if "model" not in self.get_ai_model_config("primary"):
            logger.error("Primary AI model has no 'model' key")
            return False

        for name, values in self._config.get("operations", {}).items():
            temperature = (values or {}).get("temperature")
            if temperature is not None and not 0 <= float(temperature) <= 2:
                logger.error(f"Operation '{name}' has temperature outside 0..2: {temperature}")
                return False

        logger.info("Generation configuration validation passed")
        return True

    def reload_config(self):
        self._config = self._load_config()
        logger.info("Generation configuration reloaded")

"""
Configuration manager for quiz registry settings.
"""
import logging
from typing import Dict, Any

from .models import RegistrySettings


class ConfigManager:
    """Manages runtime settings applied to a QuizRegistry."""

    # Default configuration values
    DEFAULT_VALIDATE_CATEGORIES = False
    DEFAULT_SUMMARY_SEPARATOR = "\n"

    def __init__(self):
        """Initialize ConfigManager with default settings."""
        self.logger = logging.getLogger(__name__)
        self._settings = RegistrySettings()

    def get_registry_settings(self) -> RegistrySettings:
        """
        Get current registry settings.

        Returns:
            RegistrySettings object with current configuration
        """
        return RegistrySettings(
            validate_categories=self._settings.validate_categories,
            summary_separator=self._settings.summary_separator
        )

    def set_validate_categories(self, validate: bool) -> Dict[str, any]:
        """
        Set whether the registry rejects quizzes with unknown categories.

        Args:
            validate: True to check categories on insert

        Returns:
            Dictionary with success status, error message, and user-friendly message
        """
        if not isinstance(validate, bool):
            error_msg = f"Validate categories must be a boolean, got {type(validate).__name__}"
            self.logger.error(error_msg)
            return {
                'success': False,
                'error': error_msg,
                'user_message': f"❌ Invalid input: Expected true/false, got {type(validate).__name__}"
            }

        self._settings.validate_categories = validate
        state = "enabled" if validate else "disabled"
        self.logger.info(f"Category validation {state}")
        return {
            'success': True,
            'message': f"Category validation {state}",
            'user_message': f"✅ Category validation {state}"
        }

    def get_validate_categories(self) -> bool:
        return self._settings.validate_categories

    def set_summary_separator(self, separator: str) -> Dict[str, any]:
        """
        Set the string used to join summary lines.

        Args:
            separator: Join string, must be non-empty

        Returns:
            Dictionary with success status, error message, and user-friendly message
        """
        if not isinstance(separator, str):
            error_msg = f"Summary separator must be a string, got {type(separator).__name__}"
            self.logger.error(error_msg)
            return {
                'success': False,
                'error': error_msg,
                'user_message': f"❌ Invalid input: Expected text, got {type(separator).__name__}"
            }

        if not separator:
            error_msg = "Summary separator cannot be empty"
            self.logger.error(error_msg)
            return {
                'success': False,
                'error': error_msg,
                'user_message': "❌ Summary separator cannot be empty"
            }

        self._settings.summary_separator = separator
        self.logger.info(f"Summary separator set to {separator!r}")
        return {
            'success': True,
            'message': f"Summary separator set to {separator!r}",
            'user_message': "✅ Summary separator updated"
        }

    def get_summary_separator(self) -> str:
        return self._settings.summary_separator

    def load_from_dict(self, config: Dict[str, Any]) -> Dict[str, any]:
        """
        Apply the 'registry' section of a parsed config.json.

        Unknown keys and rejected values are reported, not raised.

        Args:
            config: Full parsed configuration dictionary

        Returns:
            Dictionary with success status and a list of rejected keys
        """
        registry_config = config.get('registry', {}) if isinstance(config, dict) else {}
        if not isinstance(registry_config, dict):
            self.logger.error("'registry' config section must be an object")
            return {'success': False, 'rejected': ['registry']}

        setters = {
            'validate_categories': self.set_validate_categories,
            'summary_separator': self.set_summary_separator
        }

        rejected = []
        for key, value in registry_config.items():
            setter = setters.get(key)
            if setter is None:
                self.logger.warning(f"Unknown registry config key: {key}")
                rejected.append(key)
                continue
            if not setter(value)['success']:
                rejected.append(key)

        return {'success': not rejected, 'rejected': rejected}

    def reset_to_defaults(self) -> None:
        """Reset all settings to their default values."""
        self._settings = RegistrySettings(
            validate_categories=self.DEFAULT_VALIDATE_CATEGORIES,
            summary_separator=self.DEFAULT_SUMMARY_SEPARATOR
        )
        self.logger.info("All settings reset to default values")

    def validate_settings(self) -> Dict[str, Any]:
        """
        Validate current settings and return validation results.

        Returns:
            Dictionary with validation results and any issues found
        """
        validation_result = {
            "valid": True,
            "issues": []
        }

        if not isinstance(self._settings.validate_categories, bool):
            validation_result["valid"] = False
            validation_result["issues"].append(
                f"Invalid validate categories setting: {self._settings.validate_categories}"
            )

        if not isinstance(self._settings.summary_separator, str) or not self._settings.summary_separator:
            validation_result["valid"] = False
            validation_result["issues"].append(
                f"Invalid summary separator: {self._settings.summary_separator!r}"
            )

        return validation_result

    def get_settings_summary(self) -> str:
        """
        Get a formatted summary of current settings.

        Returns:
            Human-readable string describing current settings
        """
        validation_str = "on" if self._settings.validate_categories else "off"

        return (
            f"Registry Settings:\n"
            f"• Category validation: {validation_str}\n"
            f"• Summary separator: {self._settings.summary_separator!r}"
        )

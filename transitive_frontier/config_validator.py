"""Configuration validation for transitive-frontier."""

from typing import Any, Dict, List

from .output.formatters import SUPPORTED_FORMATS

LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class ConfigValidator:
    """Validates a merged configuration before analysis starts."""

    def validate_config(self, config: Dict[str, Any]) -> List[str]:
        """Validate complete configuration.

        Args:
            config: Configuration dictionary

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        errors.extend(self.validate_analysis(config.get("analysis", {})))
        errors.extend(self.validate_output(config.get("output", {})))
        errors.extend(self.validate_cargo(config.get("cargo", {})))
        errors.extend(self.validate_logging(config.get("logging", {})))

        return errors

    def validate_analysis(self, analysis: Dict[str, Any]) -> List[str]:
        errors = []
        if not isinstance(analysis, dict):
            return ["'analysis' section must be a mapping"]

        skip = analysis.get("skip", [])
        if skip is None:
            return errors
        if not isinstance(skip, list):
            errors.append("'analysis.skip' must be a list of strings")
        elif not all(isinstance(item, str) for item in skip):
            errors.append("'analysis.skip' entries must be strings")
        elif any(item == "" for item in skip):
            errors.append("'analysis.skip' entries must not be empty (an empty substring prunes every link)")

        return errors

    def validate_output(self, output: Dict[str, Any]) -> List[str]:
        errors = []
        if not isinstance(output, dict):
            return ["'output' section must be a mapping"]

        fmt = output.get("format", "toml")
        if not isinstance(fmt, str):
            errors.append("'output.format' must be a string")
        elif fmt.lower() not in SUPPORTED_FORMATS:
            errors.append(
                f"'output.format' must be one of {', '.join(SUPPORTED_FORMATS)}, got {fmt}"
            )

        output_file = output.get("file")
        if output_file is not None and not isinstance(output_file, str):
            errors.append("'output.file' must be a path string")

        return errors

    def validate_cargo(self, cargo: Dict[str, Any]) -> List[str]:
        errors = []
        if not isinstance(cargo, dict):
            return ["'cargo' section must be a mapping"]

        if not isinstance(cargo.get("command", "cargo"), str):
            errors.append("'cargo.command' must be a string")

        for key in ("manifest_path", "metadata_file"):
            value = cargo.get(key)
            if value is not None and not isinstance(value, str):
                errors.append(f"'cargo.{key}' must be a path string")

        extra_args = cargo.get("extra_args", [])
        if extra_args is not None and (
            not isinstance(extra_args, list)
            or not all(isinstance(arg, str) for arg in extra_args)
        ):
            errors.append("'cargo.extra_args' must be a list of strings")

        timeout = cargo.get("timeout", 300)
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
            errors.append("'cargo.timeout' must be numeric")
        elif timeout <= 0:
            errors.append(f"'cargo.timeout' must be positive, got {timeout}")

        return errors

    def validate_logging(self, logging_config: Dict[str, Any]) -> List[str]:
        if not isinstance(logging_config, dict):
            return ["'logging' section must be a mapping"]

        level = logging_config.get("level", "WARNING")
        if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
            return [f"'logging.level' must be one of {', '.join(sorted(LOG_LEVELS))}, got {level}"]
        return []

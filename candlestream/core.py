import yaml
import logging
import logging.config
from typing import Any, Dict

from .technical_analysis import IndicatorConfig, IndicatorError, create

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Loads application configuration and indicator parameter sets from YAML."""
    def __init__(self, config_path: str):
        """Initialize with path to config file."""
        self.config_path = config_path
        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load YAML configuration file."""
        try:
            with open(self.config_path, 'r') as f:
                return yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.error(f"Configuration file not found at '{self.config_path}'")
            raise
        except yaml.YAMLError as e:
            logger.error(f"Malformed YAML in configuration file: {e}")
            raise

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by key with optional default."""
        return self.config.get(key, default)

    def __getitem__(self, key: str) -> Any:
        """Dictionary-style access to config."""
        return self.config[key]

    def get_all(self) -> Dict[str, Any]:
        """Return entire configuration dictionary."""
        return self.config

    def indicator_configs(self) -> Dict[str, IndicatorConfig]:
        """
        Build validated indicator configs from the ``indicators`` section.

        Expected layout:
            indicators:
              <label>:
                type: <registry name or alias>
                params: {<field>: <value>, ...}

        Raises:
            IndicatorError: If a type is unknown, a parameter is unknown or
                unparsable, or a resulting config fails validation. The
                message names the offending label.
        """
        configs: Dict[str, IndicatorConfig] = {}
        for label, entry in (self.get('indicators') or {}).items():
            entry = entry or {}
            if not isinstance(entry, dict):
                raise IndicatorError(f"indicators.{label}: expected a mapping, got {entry!r}")
            try:
                config = create(entry.get('type', label), **(entry.get('params') or {}))
            except IndicatorError as e:
                raise IndicatorError(f"indicators.{label}: {e}") from e

            if not config.validate():
                raise IndicatorError(f"indicators.{label}: invalid parameters {config.to_dict()}", config.indicator_name)

            configs[label] = config
            logger.info(f"Loaded indicator '{label}': {config!r}")

        return configs


def setup_logging(config: Dict[str, Any]) -> None:
    """Configure application logging with fallback to basic config."""
    try:
        logging.config.dictConfig(config)
        logging.info("Logging configured successfully from config file.")
    except (ValueError, TypeError, AttributeError) as e:
        # Fallback to a basic configuration if the one in the file is malformed
        logging.basicConfig(level=logging.INFO,
                            format="%(asctime)s - %(levelname)s - %(message)s")
        logging.warning(f"Could not configure logging from dict: {e}. Using basic config.")

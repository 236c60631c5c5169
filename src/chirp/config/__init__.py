"""chirp configuration system.

Configuration is read from a YAML file and ``CHIRP_*`` environment variables
and validated with Pydantic.

Example usage:
```python
from chirp.config import load_config

config = load_config("chirp.yaml")

config.logging.level           # "WARNING"
config.registry.auto_register  # True
```
"""

from chirp.exceptions import ConfigError

from .loader import get_config, load_config, reset_config, set_config
from .schema import ChirpConfig, LoggingConfig, RegistryConfig

__all__ = [
    "ChirpConfig",
    "LoggingConfig",
    "RegistryConfig",
    "load_config",
    "get_config",
    "set_config",
    "reset_config",
    "ConfigError",
]

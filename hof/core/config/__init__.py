"""
Configuration subsystem for hof.

Static configuration is loaded from environment variables when this package
is imported. A .env file is read only through `Config.load_env_file()`.

Usage
-----
```python
from hof.core.config import Config

if Config.is_production():
    ...

summary = Config.get_config_summary()
```
"""

from hof.core.config.config import Config, Environment

__all__ = [
    "Config",
    "Environment",
]

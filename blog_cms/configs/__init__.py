from blog_cms.configs.logger import file_logger
from blog_cms.configs.settings import (
    CONFIG_MAP,
    LimiterConfig,
    RedisConfig,
    pool_kwargs,
    settings,
)

__all__ = [
    "LimiterConfig",
    "RedisConfig",
    "file_logger",
    "pool_kwargs",
    "settings",
    "CONFIG_MAP",
]

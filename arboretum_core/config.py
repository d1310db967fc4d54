from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .ai import STRATEGIES


@dataclass(frozen=True)
class Config:
    """Runtime settings for the CLI and the HTTP API, read from ARBORETUM_* environment variables."""
    log_level: str = 'WARNING'
    seed: Optional[int] = None
    strategy: str = 'strategic'
    host: str = '127.0.0.1'
    port: int = 5000


def load_config(env: Optional[Mapping[str, str]] = None) -> Config:
    env = os.environ if env is None else env
    level = env.get('ARBORETUM_LOG_LEVEL', 'WARNING').upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f'ARBORETUM_LOG_LEVEL: unknown level {level!r}')
    seed_s = env.get('ARBORETUM_SEED')
    try:
        seed = int(seed_s) if seed_s else None
        port = int(env.get('ARBORETUM_PORT', '5000'))
    except ValueError as e:
        raise ValueError(f'bad numeric setting: {e}') from None
    strategy = env.get('ARBORETUM_STRATEGY', 'strategic')
    if strategy not in STRATEGIES:
        raise ValueError(f'ARBORETUM_STRATEGY: expected one of {", ".join(STRATEGIES)}, got {strategy!r}')
    return Config(
        log_level=level,
        seed=seed,
        strategy=strategy,
        host=env.get('ARBORETUM_HOST', '127.0.0.1'),
        port=port,
    )


def configure_logging(level: str = 'WARNING') -> None:
    logging.basicConfig(
        level=level.upper(),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

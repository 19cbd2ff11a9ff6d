"""Smash game module - hold-to-charge, release-to-strike arcade simulation"""

from .config import SmashConfig, ConfigError
from .entities import Actor, Target
from .simulation import Simulation
from .smash_env import SmashEnv, run_random_episode

__all__ = [
    'SmashConfig', 'ConfigError', 'Actor', 'Target', 'Simulation',
    'SmashEnv', 'run_random_episode',
]

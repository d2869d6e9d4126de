"""Meteor shooter - fixed-tick simulation, arcade front end, gym environment"""

from .assets import AssetBundle, SpriteInfo, headless_assets, load_assets
from .config import GameConfig
from .entities import Bullet, Controls, Meteor, Player
from .meteor_env import MeteorEnv, run_random_episode
from .simulation import Simulation, TickEvents

__all__ = [
    'AssetBundle', 'SpriteInfo', 'headless_assets', 'load_assets',
    'GameConfig', 'Bullet', 'Controls', 'Meteor', 'Player',
    'MeteorEnv', 'run_random_episode', 'Simulation', 'TickEvents',
]

"""jetpack - A bouncing square with a jetpack, gravity and an overheating boost meter."""

from jetpack.clock import FrameClock
from jetpack.input import KeyTracker
from jetpack.meter import BoostMeter, HeatState
from jetpack.profiles import PhysicsProfile, get_profile, profile_names, register_profile
from jetpack.render import BarColor, RenderParams, derive_render_params
from jetpack.state import PhysicsState
from jetpack.types import HeldKeys, Key, UnknownProfileError

__all__ = [
    "PhysicsState",
    "PhysicsProfile",
    "BoostMeter",
    "HeatState",
    "RenderParams",
    "BarColor",
    "FrameClock",
    "KeyTracker",
    "Key",
    "HeldKeys",
    "UnknownProfileError",
    "derive_render_params",
    "get_profile",
    "profile_names",
    "register_profile",
]

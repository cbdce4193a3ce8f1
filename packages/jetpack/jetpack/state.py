"""PhysicsState - the square's position, velocity, size and boost meter."""
from __future__ import annotations

from dataclasses import dataclass, field

from jetpack import vec
from jetpack.meter import BoostMeter
from jetpack.profiles import PhysicsProfile
from jetpack.render import RenderParams, derive_render_params
from jetpack.types import HeldKeys, Key, Vec


@dataclass
class PhysicsState:
    """Mutable per-frame state of the square.

    ``position`` is the top-left corner in viewport pixels. Velocity is in
    pixels per frame; only gravity and thrust cost are scaled by ``dt``.
    """

    profile: PhysicsProfile
    position: Vec
    velocity: Vec
    size: float
    meter: BoostMeter = field(default_factory=BoostMeter)

    @classmethod
    def initial(cls, profile: PhysicsProfile) -> PhysicsState:
        """Square centred in the viewport with a full meter."""
        width, height = profile.viewport
        size = profile.initial_size
        return cls(
            profile=profile,
            position=((width - size) / 2.0, (height - size) / 2.0),
            velocity=profile.initial_velocity,
            size=size,
        )

    @property
    def bounds(self) -> Vec:
        """Largest valid top-left coordinate on each axis."""
        width, height = self.profile.viewport
        return (width - self.size, height - self.size)

    def update(self, held: HeldKeys, dt: float) -> None:
        """Advance one frame: input, then physics, then meter regeneration.

        A frame with no elapsed time does nothing.
        """
        if dt == 0.0:
            return
        self.apply_input(held, dt)
        self.integrate(dt)
        self.regenerate(dt)

    def apply_input(self, held: HeldKeys, dt: float) -> None:
        p = self.profile
        vx, vy = self.velocity
        if Key.RIGHT in held:
            vx += p.move_step
        if Key.LEFT in held:
            vx -= p.move_step
        if Key.DOWN in held:
            vy += p.dive_step
        if Key.UP in held and self.meter.try_spend(dt * p.thrust_cost_rate):
            vy -= p.thrust_impulse * p.weight_multiplier(self.size)
        self.velocity = (vx, vy)

        if p.resizable:
            if Key.GROW in held:
                self._resize(p.size_step)
            if Key.SHRINK in held:
                self._resize(-p.size_step)

    def _resize(self, delta: float) -> None:
        new_size = vec.clamp(self.size + delta, self.profile.min_size, self.profile.max_size)
        applied = new_size - self.size
        self.size = new_size
        # Keep the bottom edge where it was.
        self.position = vec.with_y(self.position, self.position[1] - applied)

    def integrate(self, dt: float) -> None:
        """Gravity, edge bounce, position step, then contact friction.

        Bounce reverses velocity only. Position is never clamped, so the
        square may overshoot an edge for a frame before coming back.
        """
        p = self.profile
        max_x, max_y = self.bounds
        vx, vy = self.velocity
        vy += p.gravity * dt

        next_x, next_y = vec.add(self.position, (vx, vy))
        if next_x < 0.0 or next_x > max_x:
            vx *= -p.bounce_factor
        if next_y > max_y or (p.ceiling and next_y < 0.0):
            vy *= -p.bounce_factor

        self.velocity = (vx, vy)
        self.position = vec.add(self.position, self.velocity)

        if p.friction:
            x, y = self.position
            margin = p.contact_margin
            # Friction acts along the surface being touched.
            if x <= margin or x >= max_x - margin:
                vy -= vy * p.friction
            if y >= max_y - margin or (p.ceiling and y <= margin):
                vx -= vx * p.friction
            self.velocity = (vx, vy)

    def regenerate(self, dt: float) -> None:
        self.meter.regenerate(dt, self.profile.regen_rate, self.profile.overheat_regen_rate)

    def render_params(self) -> RenderParams:
        return derive_render_params(self)

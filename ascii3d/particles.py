#
# PROJECT: ascii3d
# MODULE: ascii3d/particles.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
import math
import random
from typing import Optional

from .math_utils import Vec3

logger = logging.getLogger(__name__)


class Particle:
    """A point with velocity and remaining life (seconds)."""
    __slots__ = ('position', 'velocity', 'life', 'char')

    def __init__(self, position: Vec3, velocity: Vec3, life: float = 1.0, char: str = '·'):
        self.position = position
        self.velocity = velocity
        self.life = life
        self.char = char

    def __repr__(self):
        return f"Particle({self.position!r}, life={self.life:.2f}, char={self.char!r})"

    def update(self, dt: float, rng: random.Random, brownian_strength: float = 0.1) -> bool:
        """Apply Brownian jitter, integrate one step and age. Returns False once dead."""
        s = brownian_strength
        v = self.velocity
        self.velocity = Vec3(
            v.x + rng.uniform(-s, s) * dt,
            v.y + rng.uniform(-s, s) * dt,
            v.z + rng.uniform(-s, s) * dt,
        )
        self.position = self.position + self.velocity * dt
        self.life -= dt
        return self.life > 0


def _unit_sphere_direction(rng: random.Random) -> Vec3:
    # Inverse-CDF sampling keeps points uniform over the sphere
    theta = rng.random() * 2 * math.pi
    phi = math.acos(2 * rng.random() - 1)
    return Vec3(
        math.sin(phi) * math.cos(theta),
        math.sin(phi) * math.sin(theta),
        math.cos(phi),
    )


class Emitter:
    """Strategy producing one new particle per spawn() call."""

    def spawn(self, rng: random.Random) -> Particle:
        raise NotImplementedError


class PointEmitter(Emitter):
    """Particles leave a single point in uniformly random directions."""

    def __init__(self, origin: Vec3 = Vec3.ZERO, speed: float = 0.5, chars=('·',)):
        self.origin = origin
        self.speed = speed
        self.chars = tuple(chars)

    def spawn(self, rng: random.Random) -> Particle:
        direction = _unit_sphere_direction(rng)
        return Particle(self.origin, direction * self.speed, char=rng.choice(self.chars))


class BoxEmitter(Emitter):
    """Particles start on a random face of a cube and move along its normal."""

    _NORMALS = (
        Vec3(1, 0, 0), Vec3(-1, 0, 0),
        Vec3(0, 1, 0), Vec3(0, -1, 0),
        Vec3(0, 0, 1), Vec3(0, 0, -1),
    )

    def __init__(self, size: float = 1.0, speed: float = 0.5, chars=('·', '∙', '•', '°')):
        self.size = size
        self.speed = speed
        self.chars = tuple(chars)

    def spawn(self, rng: random.Random) -> Particle:
        half = self.size / 2
        normal = self._NORMALS[rng.randrange(6)]
        # Random point on the face: the normal axis is pinned to +-half
        coords = []
        for n in normal:
            if n:
                coords.append(n * half)
            else:
                coords.append((rng.random() - 0.5) * self.size)
        return Particle(Vec3(*coords), normal * self.speed, char=rng.choice(self.chars))


class SphereEmitter(Emitter):
    """Particles start on a sphere surface and move radially outwards."""

    def __init__(self, radius: float = 0.5, speed: float = 0.5, chars=('✦', '✧', '·', '°')):
        self.radius = radius
        self.speed = speed
        self.chars = tuple(chars)

    def spawn(self, rng: random.Random) -> Particle:
        direction = _unit_sphere_direction(rng)
        return Particle(direction * self.radius, direction * self.speed,
                        char=rng.choice(self.chars))


class ParticleSystem:
    """
    Fixed-capacity particle pool fed by an emitter.

    update(dt) accumulates emission_rate * dt, spawns one particle per whole
    unit while capacity allows, caps the leftover at one second's worth,
    then integrates every live particle and drops the dead ones.
    Pass ``seed`` (or an explicit ``rng``) for reproducible motion.
    """

    def __init__(self, emitter: Emitter, max_particles: int = 100,
                 emission_rate: float = 20.0, particle_lifetime: float = 2.0,
                 brownian_strength: float = 0.3, seed: Optional[int] = None,
                 rng: Optional[random.Random] = None):
        if max_particles < 0:
            raise ValueError(f"max_particles must be >= 0, got {max_particles}")
        if emission_rate < 0:
            raise ValueError(f"emission_rate must be >= 0, got {emission_rate}")
        if particle_lifetime <= 0:
            raise ValueError(f"particle_lifetime must be positive, got {particle_lifetime}")
        self.emitter = emitter
        self.max_particles = max_particles
        self.emission_rate = emission_rate
        self.particle_lifetime = particle_lifetime
        self.brownian_strength = brownian_strength
        self._rng = rng if rng is not None else random.Random(seed)
        self._particles = []
        self._accumulator = 0.0

    @property
    def particles(self):
        """Live particles in spawn order (read-only snapshot)."""
        return tuple(self._particles)

    @property
    def emission_accumulator(self) -> float:
        return self._accumulator

    def __len__(self):
        return len(self._particles)

    def update(self, dt: float):
        if dt < 0:
            raise ValueError(f"dt must be >= 0, got {dt}")

        self._accumulator += self.emission_rate * dt
        while self._accumulator >= 1 and len(self._particles) < self.max_particles:
            particle = self.emitter.spawn(self._rng)
            particle.life = self.particle_lifetime
            self._particles.append(particle)
            self._accumulator -= 1

        # Cap accumulator to prevent a burst after a pause
        if self._accumulator > self.emission_rate:
            self._accumulator = self.emission_rate

        rng = self._rng
        strength = self.brownian_strength
        self._particles = [p for p in self._particles if p.update(dt, rng, strength)]

    def reset(self):
        logger.debug("Resetting particle system (%d live particles dropped)", len(self._particles))
        self._particles = []
        self._accumulator = 0.0

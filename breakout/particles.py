"""Short-lived debris particles spawned when a brick breaks."""

from __future__ import annotations

import random

from breakout.vector import Vector

PARTICLE_TEXTURE = "effect"
PARTICLE_SIZE = 5
PARTICLE_LIFE = 2


class Particle:
    """A single particle falling from a broken brick."""

    def __init__(self, x: float, y: float, rng: random.Random) -> None:
        self.position = Vector(x, y)
        self.velocity = Vector(rng.uniform(-1.0, 1.0), 1.0)
        self.life = PARTICLE_LIFE

    def update(self) -> None:
        """Move one step and age by one frame."""
        self.position += self.velocity
        self.life -= 1

    def render(self, textures, surface) -> None:
        textures.draw(
            PARTICLE_TEXTURE,
            int(self.position.x),
            int(self.position.y),
            PARTICLE_SIZE,
            PARTICLE_SIZE,
            surface,
            False,
        )

    def kill(self) -> None:
        self.life = 0


class ParticlesManager:
    """A burst of particles emitted together from one point."""

    def __init__(self, size: int, rng: random.Random | None = None) -> None:
        self.size = size
        self.rng = rng if rng is not None else random.Random()
        self.particles: list[Particle] = []

    def init_particles(self, x: float, y: float, w: int, h: int) -> None:
        """Spawn a fresh burst at the bottom centre of the given rectangle."""
        origin_x = x + w // 2
        origin_y = y + h
        self.particles = [
            Particle(origin_x, origin_y, self.rng) for _ in range(self.size)
        ]

    def update_particles(self) -> None:
        """Advance every particle and drop those whose life has run out."""
        for particle in self.particles:
            particle.update()
        self.particles = [p for p in self.particles if p.life > 0]

    def render_particles(self, textures, surface) -> None:
        for particle in self.particles:
            particle.render(textures, surface)

    def kill_particles(self) -> None:
        for particle in self.particles:
            particle.kill()

    def __len__(self) -> int:
        return len(self.particles)
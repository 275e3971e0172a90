"""Spells made of particles, each particle a set of small cubes."""

from __future__ import annotations

import random

import numpy as np

from voxspell.kinds import SpellType

_UP = np.array([0.0, 1.0, 0.0])
_CUBE_CORNERS = (
    (-0.5, -0.5, -0.5),  # front-bottom-left
    (-0.5, 0.5, -0.5),  # front-top-left
    (0.5, 0.5, -0.5),  # front-top-right
    (0.5, -0.5, -0.5),  # front-bottom-right
    (-0.5, -0.5, 0.5),  # back-bottom-left
    (-0.5, 0.5, 0.5),  # back-top-left
    (0.5, 0.5, 0.5),  # back-top-right
    (0.5, -0.5, 0.5),  # back-bottom-right
)
_CUBE_TRIANGLES = (
    (0, 1, 2), (0, 2, 3),  # front
    (4, 5, 6), (4, 6, 7),  # back
    (0, 4, 5), (0, 5, 1),  # left
    (3, 2, 6), (3, 7, 6),  # right
    (1, 5, 6), (1, 2, 6),  # top
    (4, 0, 3), (4, 3, 7),  # bottom
)
_JOLT_DELAY = 120
_JOLT_STEPS = 7


def _vec(value) -> np.ndarray:
    return np.array(value, dtype=float).reshape(3)


class Particle:
    """A moving particle whose geometry is one cube per mesh point."""

    def __init__(self, world_pos, direction, size, mesh, view_matrix):
        self.size = float(size)
        self.aim = _vec(direction)
        self.position = _vec(world_pos)
        self.off = np.zeros(3)
        self.move_index = 0
        self.last_move = np.zeros(3)
        self.vertices: list[np.ndarray] = []
        self.indices: list[tuple[int, int, int]] = []
        for point in mesh:
            self.create(point, direction)

    @property
    def vertex_array(self) -> np.ndarray:
        """All vertices as an (n, 3) array."""
        return np.array(self.vertices, dtype=float).reshape(-1, 3)

    def create(self, model_pos, direction):
        """Append a unit cube centred on ``model_pos``."""
        centre = _vec(model_pos)
        for corner in _CUBE_CORNERS:
            self.add_vertex(centre + np.array(corner))
        base = len(self.vertices) - len(_CUBE_CORNERS)
        for a, b, c in _CUBE_TRIANGLES:
            self.add_triangle(a + base, b + base, c + base)

    def add_vertex(self, point):
        self.vertices.append(_vec(point))

    def add_triangle(self, i1, i2, i3):
        self.indices.append((int(i1), int(i2), int(i3)))

    def shift(self, delta_time, velocity):
        """Move the particle forward along its aim."""
        forward = self.aim * delta_time * velocity
        self.position = self.position + forward
        self.off = self.off + forward


class Spell:
    """A spell that spawns particles around an origin."""

    velocity = 0.0
    range = 0.0
    density = 0
    radius = 0
    num_particles = 1
    particle_size = 0.0
    kind: SpellType | None = None

    def __init__(self, rng=None):
        self._rng = rng if rng is not None else random.Random()
        self.particles: list[Particle] = []
        self.mesh: list[np.ndarray] = []
        self.create_spell_mesh()

    def _random_offset(self) -> int:
        return self._rng.randint(-self.radius, self.radius)

    def summon(self, origin, direction, right, view_matrix):
        """Spawn ``density`` particles scattered around ``origin``."""
        self._random_offset()
        origin = _vec(origin)
        right = _vec(right)
        for _ in range(self.density):
            random_x = self._random_offset() * 0.02
            random_y = self._random_offset() * 0.02
            start = origin + right * random_x + _UP * random_y
            self.particles.append(
                Particle(start, direction, self.particle_size, self.mesh, view_matrix)
            )

    def create_spell_mesh(self):
        self.mesh = [np.zeros(3)]

    def tick(self, delta_time, direction, right, pos):
        print("spell tick", end="")


class Lightning(Spell):
    """A bolt of cube chains that jitter as they fly."""

    velocity = 5.0
    range = 10.0
    density = 10
    radius = 10
    particle_size = 0.025
    num_particles = 7
    kind = SpellType.LIGHTNING

    def __init__(self, rng=None):
        super().__init__(rng)

    def tick(self, delta_time, direction, right, pos):
        self.jolt(delta_time, right)
        kept = []
        for particle in self.particles:
            if np.linalg.norm(particle.off) <= self.range:
                particle.shift(delta_time, self.velocity)
                kept.append(particle)
        self.particles = kept

    def jolt(self, delta_time, right):
        """Displace one cube of each particle in turn by a random sideways move."""
        right = _vec(right)
        for particle in self.particles:
            per_cube = len(particle.vertices) // self.num_particles
            if particle.move_index == 0:
                rand_x = self._rng.uniform(-0.5, 0.5)
                rand_y = self._rng.uniform(-0.5, 0.5)
                particle.last_move = right * rand_x + _UP * rand_y
            if particle.move_index % _JOLT_DELAY == 0:
                cube = particle.move_index // _JOLT_DELAY
                for vertex in particle.vertices[cube * per_cube:(cube + 1) * per_cube]:
                    vertex += particle.last_move
            particle.move_index += 1
            if particle.move_index >= _JOLT_STEPS * _JOLT_DELAY:
                particle.move_index = 0

    def create_spell_mesh(self):
        self.mesh = [np.array([0.0, 0.0, float(i)]) for i in range(self.num_particles)]


class WaterBall(Spell):
    """A ball that flies out, then returns to grow at the caster's position."""

    velocity = 5.0
    range = 20.0
    density = 1
    radius = 10
    particle_size = 0.025
    num_particles = 1
    kind = SpellType.WATERBALL
    grow_factor = 0.05
    max_size = 0.1

    def __init__(self, rng=None):
        self.release = True
        super().__init__(rng)

    def tick(self, delta_time, direction, right, pos):
        kept = []
        for particle in self.particles:
            if not self.release:
                if np.linalg.norm(particle.off) <= self.range:
                    particle.shift(delta_time, self.velocity)
                    kept.append(particle)
                else:
                    self.release = not self.release
            else:
                self.grow(delta_time)
                particle.position = _vec(pos)
                particle.aim = _vec(direction)
                kept.append(particle)
        self.particles = kept

    def grow(self, delta_time):
        for particle in self.particles:
            if particle.size < self.max_size:
                particle.size += self.grow_factor * delta_time

    @staticmethod
    def _half_shell(sign: int) -> list[np.ndarray]:
        x_range = 3
        z_range = 3
        corner_num = x_range // 2
        corner_off = 0
        points = []
        for layer in range(1, 4):
            y = sign * layer
            for c in range(corner_num):
                for d in range(corner_num):
                    if corner_num > 1 and c == d:
                        continue
                    tc = x_range - (c + layer + corner_off)
                    td = x_range - (d + layer + corner_off)
                    points += [(tc, y, td), (-tc, y, td), (tc, y, -td), (-tc, y, -td)]
            corner_num -= 1
            corner_off += 1
            half = x_range // 2
            for i in range(-half, half + 1):
                for j in (-z_range, z_range):
                    points += [(j, y, i), (i, y, j)]
            z_range -= 1
        return [np.array(p, dtype=float) for p in points]

    def create_spell_mesh(self):
        self.mesh = self._half_shell(1) + self._half_shell(-1)

    def summon(self, origin, direction, right, view_matrix):
        if self.release and not self.particles:
            for _ in range(self.density):
                self.particles.append(
                    Particle(origin, direction, self.particle_size, self.mesh, view_matrix)
                )
        else:
            self.release = False
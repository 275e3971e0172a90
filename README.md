# voxspell

Spell effects for a voxel game, built from small cube particles.

## Modules

- `voxspell.kinds` has `SpellType` (`LIGHTNING`, `WATERBALL`), the `Block` record (a single `active` flag, `False` by default) and `BLOCK_SIZE` (0.5).
- `voxspell.spells` has `Particle`, the base `Spell` and the two spells `Lightning` and `WaterBall`.
- `voxspell.weapon` has `WeaponSystem`, which holds the spells and casts the current one.

## Particles

A `Particle` is built from a mesh of model-space points. Each point becomes a unit cube centred on it, with 8 vertices and 12 triangles. The vertices are kept in `vertices`, and `vertex_array` returns them as an `(n, 3)` array. The triangles are kept in `indices` as index triples.

`shift(delta_time, velocity)` moves the particle along its `aim`. It updates both `position` and `off`, which is the distance travelled so far.

## Spells

Every spell keeps its live particles in `particles` and its mesh in `mesh`. Each spell takes an optional `random.Random` as `rng`. Pass one with a seed to make the scatter and jitter reproducible.

- `Lightning.summon` spawns 10 particles. Each one is offset at random sideways (along `right`) and vertically from the origin. Each particle is a column of 7 cubes.
  - `tick` first calls `jolt`. It then moves every particle whose `off` is still within range 10 and drops the others.
  - `jolt` moves one cube of each particle by a random sideways and vertical amount. It moves to the next cube every 120 calls and starts again from the first cube after all 7.
- `WaterBall` builds a hollow ball of cubes.
  - `summon` spawns a single ball when the spell is released and has no ball. Otherwise it clears `release`.
  - When `release` is set, `tick` makes the ball grow and places it at the given position and direction. `grow` adds `0.05 * delta_time` to the size until it reaches `0.1`.
  - When `release` is clear, `tick` moves the ball forward. Once the ball has gone past range 20, `tick` removes it and sets `release` again.
- The base `Spell.tick` only prints `spell tick`.

## Usage

```python
import random
import numpy as np
from voxspell.spells import Lightning
from voxspell.weapon import WeaponSystem

rng = random.Random(1)
weapons = WeaponSystem(camera=None, rng=rng)

origin = np.zeros(3)
forward = np.array([0.0, 0.0, 1.0])
right = np.array([1.0, 0.0, 0.0])
view = np.eye(4)

weapons.spawn(origin, forward, right, view)   # summons with the current spell
spell = weapons.current_spell
assert isinstance(spell, Lightning)

for _ in range(60):
    spell.tick(1 / 60, forward, right, origin)
```

`WeaponSystem.spells` holds a `Lightning` and a `WaterBall` in that order, and `current_spell` starts as the first. The camera argument is only stored.

## What it does not do

The package keeps geometry as plain vertex and index lists. It does not draw anything, open a window, read input, or keep a voxel world. The view matrix passed to `summon` is accepted but not used.

## Installing

```
pip install .
pip install ".[test]"
pytest
```
"""The player's selection of spells."""

from __future__ import annotations

import random

from voxspell.spells import Lightning, Spell, WaterBall


class WeaponSystem:
    """Holds the available spells and casts the current one."""

    def __init__(self, camera=None, rng=None):
        rng = rng if rng is not None else random.Random()
        self.camera = camera
        self.spells: list[Spell] = [Lightning(rng), WaterBall(rng)]
        self.current_spell: Spell = self.spells[0]

    def spawn(self, origin, direction, right, view_matrix):
        self.current_spell.summon(origin, direction, right, view_matrix)
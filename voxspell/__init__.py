"""Particle-based spell effects for a voxel game: spell kinds, spells and a weapon system."""

__version__ = "0.1.0"
__all__ = ["kinds", "spells", "weapon"]
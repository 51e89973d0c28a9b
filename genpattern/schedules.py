"""Cooling schedules for simulated annealing."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ExponentialSchedule:
    """Temperature ``t_initial * alpha ** iteration``."""

    alpha: float

    def __call__(self, t_initial: float, t: float, iteration: int) -> float:
        return t_initial * self.alpha**iteration


@dataclass
class LinearSchedule:
    """Temperature reduced by the factor ``k`` at every step."""

    k: float

    def __call__(self, t_initial: float, t: float, iteration: int) -> float:
        return self.k * t
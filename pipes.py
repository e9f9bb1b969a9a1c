import random
from enum import Enum

import pygame

from physics import Body
from settings import (GAME_HEIGHT, PIPE_MARGIN, PIPE_VELOCITY, PIPES_TO_RENDER,
                      pipe_height, pipe_width)


class Role(Enum):
    UPPER = "upper"
    LOWER = "lower"


class Pipe(Body):
    """One pipe. x/y is the anchor: bottom-left for UPPER, top-left for LOWER."""

    def __init__(self, role: Role):
        Body.__init__(self, 0, 0, pipe_width, pipe_height)
        self.role = role
        self.immovable = True

    @property
    def rect(self) -> pygame.Rect:
        if self.role is Role.UPPER:
            return pygame.Rect(int(self.x), int(self.y) - self.height, self.width, self.height)
        return pygame.Rect(int(self.x), int(self.y), self.width, self.height)


def place_pair(upper, lower, rightmost_x, profile,
               field_height=GAME_HEIGHT, margin=PIPE_MARGIN, rng=random):
    # randint is inclusive on both ends
    distance = rng.randint(*profile.distance_range)
    opening = rng.randint(*profile.opening_range)
    vertical = rng.randint(margin, field_height - margin - opening)

    upper.x = rightmost_x + distance
    upper.y = vertical

    lower.x = upper.x
    lower.y = upper.y + opening


class PipeField:
    """Fixed pool of pipe pairs. Index 2k is the upper pipe of pair k, 2k+1 the lower."""

    def __init__(self, profile_source, pairs=PIPES_TO_RENDER, rng=random,
                 field_height=GAME_HEIGHT, margin=PIPE_MARGIN):
        self.profile_source = profile_source
        self.rng = rng
        self.field_height = field_height
        self.margin = margin

        self._pipes = []
        for _ in range(pairs):
            upper = Pipe(Role.UPPER)
            lower = Pipe(Role.LOWER)
            self._pipes.extend([upper, lower])
            self._place(upper, lower)

        self.set_velocity_x(-PIPE_VELOCITY)

    @property
    def pipes(self):
        return tuple(self._pipes)

    def pairs(self):
        return [(self._pipes[i], self._pipes[i + 1]) for i in range(0, len(self._pipes), 2)]

    def set_velocity_x(self, vx):
        # every pipe shares one velocity; recycle() pairs by arrival order and relies on it
        for pipe in self._pipes:
            pipe.vx = vx

    def rightmost_x(self):
        rightmost = 0
        for pipe in self._pipes:
            rightmost = max(pipe.x, rightmost)
        return rightmost

    def _place(self, upper, lower):
        place_pair(upper, lower, self.rightmost_x(), self.profile_source(),
                   field_height=self.field_height, margin=self.margin, rng=self.rng)

    def recycle(self, on_recycled=None) -> int:
        """Re-place pipes that scrolled past the left edge, two at a time in pool order.

        Returns the number of pairs recycled.
        """
        queued = []
        recycled = 0
        for pipe in self._pipes:
            if pipe.right > 0:
                continue
            queued.append(pipe)
            if len(queued) == 2:
                upper, lower = queued
                if upper.role is not Role.UPPER or lower.role is not Role.LOWER:
                    print(f"⚠ Recycling mismatched pipes ({upper.role.value}, {lower.role.value}); "
                          "pipes no longer scroll off in lockstep")
                self._place(upper, lower)
                queued = []
                recycled += 1
                if on_recycled is not None:
                    on_recycled()
        return recycled

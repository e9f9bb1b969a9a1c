import pygame


class Body:
    """Axis-aligned body integrated by World. Position is the top-left corner."""

    def __init__(self, x, y, width, height):
        self.x = float(x)
        self.y = float(y)
        self.width = width
        self.height = height
        self.vx = 0.0
        self.vy = 0.0
        self.gravity = 0.0
        self.immovable = False
        self.collide_world_bounds = False

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.x), int(self.y), self.width, self.height)

    @property
    def top(self):
        return self.rect.top

    @property
    def bottom(self):
        return self.rect.bottom

    @property
    def right(self):
        return self.rect.right


class World:
    def __init__(self, width, height):
        self.width = width
        self.height = height
        self.bodies = []
        self.colliders = []
        self.paused = False

    def add(self, body):
        self.bodies.append(body)
        return body

    def add_group(self, group):
        self.bodies.extend(group)

    def add_collider(self, body, group, callback):
        """callback(body, other) fires on each step where body overlaps a member of group."""
        self.colliders.append((body, group, callback))

    def pause(self):
        self.paused = True

    def resume(self):
        self.paused = False

    def step(self, dt: float):
        """Advance the simulation by dt seconds."""
        if self.paused:
            return

        for body in self.bodies:
            if body.immovable:
                body.x += body.vx * dt
                continue
            body.vy += body.gravity * dt
            body.x += body.vx * dt
            body.y += body.vy * dt
            if body.collide_world_bounds:
                self._clamp(body)

        for body, group, callback in list(self.colliders):
            rect = body.rect
            for other in group:
                if rect.colliderect(other.rect):
                    callback(body, other)
                    break
            # a callback may have paused the world
            if self.paused:
                return

    def _clamp(self, body):
        if body.y < 0:
            body.y = 0.0
            body.vy = 0.0
        elif body.y + body.height > self.height:
            body.y = float(self.height - body.height)
            body.vy = 0.0
        body.x = min(max(body.x, 0.0), float(self.width - body.width))

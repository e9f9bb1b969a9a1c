from physics import Body
from settings import FLAP_VELOCITY, GRAVITY, bird_height, bird_width


class Bird(Body):
    def __init__(self, x, y):
        Body.__init__(self, x, y, bird_width, bird_height)
        self.gravity = GRAVITY
        self.collide_world_bounds = True
        self.alive = True
        self.hit = False  # drawn tinted once the bird crashes

        # animation frame: 0 down, 1 mid, 2 up
        self.frame_index = 1

        # simple animation timer
        self.frame_ms = 125
        self._accum_ms = 0

        # when player flaps, show "up" frame for a bit
        self.flap_lock_ms = 120
        self._flap_timer = 0

    def flap(self):
        # override, never add: every flap gives the same lift
        self.vy = -FLAP_VELOCITY
        self._flap_timer = self.flap_lock_ms
        self.frame_index = 2

    def animate(self, dt_ms: int):
        """Advance animation. dt_ms is milliseconds since last frame."""
        if self.hit:
            return
        if self._flap_timer > 0:
            self._flap_timer -= dt_ms
            self.frame_index = 2
            return

        self._accum_ms += dt_ms
        if self._accum_ms >= self.frame_ms:
            self._accum_ms = 0
            # mid <-> up while gliding
            self.frame_index = 2 if self.frame_index == 1 else 1

        # falling fast: wings down
        if self.vy > FLAP_VELOCITY / 2:
            self.frame_index = 0

import random
from dataclasses import dataclass
from enum import Enum

import pygame

from bird import Bird
from difficulty import DIFFICULTIES, tier_for
from hud import WHITE, TextNode
from physics import World
from pipes import PipeField, Role
from scheduler import TaskQueue
from scoring import ScoreBoard
from settings import (COUNTDOWN_FROM, COUNTDOWN_STEP_MS, PIPES_TO_RENDER,
                      RESTART_DELAY_MS)


class Phase(Enum):
    RUNNING = "running"
    PAUSED = "paused"
    COUNTDOWN = "countdown"
    DEAD = "dead"


@dataclass
class GameState:
    score: int = 0
    difficulty: str = "easy"
    is_paused: bool = False
    is_alive: bool = True


FLAP_KEYS = (pygame.K_SPACE, pygame.K_UP, pygame.K_x)
PAUSE_KEYS = (pygame.K_p, pygame.K_ESCAPE)
PAUSE_BUTTON_SIZE = 36


class PlayScene:
    """One playthrough: bird, pipe pool, score and the Running/Paused/Dead machine."""

    name = "play"

    def __init__(self, ctx, scenes, store, rng=random, pairs=PIPES_TO_RENDER):
        self.ctx = ctx
        self.scenes = scenes
        self.store = store
        self.rng = rng
        self.pairs = pairs

        self.timers = TaskQueue()
        self.state = GameState()
        self.world = None
        self.bird = None
        self.field = None
        self.score_board = None
        self.countdown = 0
        self.countdown_task = None
        self.countdown_text = None
        self.pause_button = pygame.Rect(
            ctx.width - 10 - PAUSE_BUTTON_SIZE, ctx.height - 10 - PAUSE_BUTTON_SIZE,
            PAUSE_BUTTON_SIZE, PAUSE_BUTTON_SIZE,
        )

    # --- lifecycle ---

    def create(self):
        self.timers.clear()
        self.state = GameState()
        self.countdown = 0
        self.countdown_task = None
        self.countdown_text = TextNode(*self.ctx.screen_center, "", color=WHITE, origin=(0.5, 0.5))

        self.world = World(self.ctx.width, self.ctx.height)
        self.bird = self.world.add(Bird(*self.ctx.start_position))
        self.field = PipeField(self._current_profile, pairs=self.pairs, rng=self.rng,
                               field_height=self.ctx.height)
        self.world.add_group(self.field.pipes)
        self.world.add_collider(self.bird, self.field.pipes, lambda bird, pipe: self.game_over())

        self.score_board = ScoreBoard(self.state, self.store)

    @property
    def phase(self) -> Phase:
        if not self.state.is_alive:
            return Phase.DEAD
        if self.state.is_paused:
            if self.countdown_task is not None and not self.countdown_task.cancelled:
                return Phase.COUNTDOWN
            return Phase.PAUSED
        return Phase.RUNNING

    def update(self, dt_ms):
        self.timers.advance(dt_ms)
        self.world.step(dt_ms / 1000.0)
        self.bird.animate(dt_ms)

        # bounds before recycling: a dying bird never banks a point this tick
        if self.state.is_alive:
            self.check_game_status()
        if self.phase is Phase.RUNNING:
            self.field.recycle(self._on_pass_through)

    # --- per-tick checks ---

    def check_game_status(self):
        if self.bird.bottom >= self.ctx.height or self.bird.y <= 0:
            self.game_over()

    def _current_profile(self):
        return DIFFICULTIES[self.state.difficulty]

    def _on_pass_through(self):
        self.score_board.on_pass_through()
        self.state.difficulty = tier_for(self.state.score)

    # --- transitions ---

    def flap(self):
        if self.state.is_paused:
            return
        self.bird.flap()

    def pause(self):
        if self.phase is not Phase.RUNNING:
            return
        self.state.is_paused = True
        self.world.pause()
        self.scenes.pause(self.name)
        self.scenes.launch("pause")

    def on_resume(self):
        """Called by the scene stack when the pause overlay hands control back."""
        self.countdown = COUNTDOWN_FROM
        self.countdown_text.set_text(f"Resume in: {self.countdown}")
        self.countdown_task = self.timers.schedule(COUNTDOWN_STEP_MS, self.count_down, repeat=True)

    def count_down(self):
        self.countdown -= 1
        self.countdown_text.set_text(f"Resume in: {self.countdown}")

        if self.countdown <= 0:
            self.state.is_paused = False
            self.countdown_text.set_text("")
            self.world.resume()
            self.countdown_task.cancel()

    def game_over(self):
        if not self.state.is_alive:
            return
        self.state.is_alive = False
        self.bird.alive = False
        self.world.pause()
        self.bird.hit = True

        # a live countdown would resume physics under the dead bird
        if self.countdown_task is not None:
            self.countdown_task.cancel()
            self.countdown_text.set_text("")

        self.score_board.save_best_score()

        # restart after 1 s
        self.timers.schedule(RESTART_DELAY_MS, lambda: self.scenes.restart(self.name))

    # --- input / drawing ---

    def handle_event(self, event):
        if event.type == pygame.KEYDOWN:
            if event.key in FLAP_KEYS:
                self.flap()
            elif event.key in PAUSE_KEYS:
                self.pause()
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            # taps arrive here too, as emulated left clicks
            if self.pause_button.collidepoint(event.pos):
                self.pause()
            else:
                self.flap()

    def draw(self, window, assets):
        window.blit(assets["sky"], (0, 0))

        for pipe in self.field.pipes:
            img = assets["pipe_top"] if pipe.role is Role.UPPER else assets["pipe_bottom"]
            window.blit(img, pipe.rect)

        window.blit(assets["bird"][self.bird.frame_index], self.bird.rect)
        if self.bird.hit:
            tint = pygame.Surface(self.bird.rect.size, pygame.SRCALPHA)
            tint.fill((0xEE, 0x48, 0x24, 140))
            window.blit(tint, self.bird.rect)

        window.blit(assets["pause"], self.pause_button)

        fonts = assets["fonts"]
        self.score_board.score_text.draw(window, fonts)
        self.score_board.best_score_text.draw(window, fonts)
        self.countdown_text.draw(window, fonts)

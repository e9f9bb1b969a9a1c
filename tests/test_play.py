import pygame
import pytest

from play import Phase
from settings import GAME_HEIGHT


def test_fresh_playthrough(play):
    assert play.state.score == 0
    assert play.state.difficulty == "easy"
    assert not play.state.is_paused
    assert play.state.is_alive
    assert play.phase is Phase.RUNNING
    assert len(play.field.pipes) == 8


def test_flap_overrides_velocity(play):
    play.bird.vy = 250
    play.flap()
    assert play.bird.vy == -300
    play.flap()
    assert play.bird.vy == -300


def test_gravity_pulls_bird_down(play):
    y = play.bird.y
    play.update(100)
    assert play.bird.y > y
    assert play.bird.vy == pytest.approx(60)


def test_hitting_the_floor_kills(play, store):
    play.bird.y = GAME_HEIGHT

    play.update(16)

    assert play.phase is Phase.DEAD
    assert not play.state.is_alive
    assert play.world.paused
    assert play.bird.hit
    assert store.get("bestScore") == "0"


def test_hitting_the_ceiling_kills(play):
    play.bird.y = -5
    play.bird.vy = -300
    play.update(16)
    assert play.phase is Phase.DEAD


def test_floor_kills_during_resume_countdown(scenes, play):
    play.pause()
    scenes.get("pause").resume_play()
    assert play.phase is Phase.COUNTDOWN

    play.bird.y = GAME_HEIGHT
    play.update(16)

    assert play.phase is Phase.DEAD


def test_touching_a_pipe_kills(play):
    upper, lower = play.field.pairs()[0]
    upper.x = lower.x = play.bird.x
    play.bird.y = upper.y - 20

    play.update(16)

    assert play.phase is Phase.DEAD


def test_dying_player_does_not_score_same_tick(play):
    upper, lower = play.field.pairs()[0]
    upper.x = lower.x = -100
    play.bird.y = GAME_HEIGHT

    play.update(16)

    assert play.phase is Phase.DEAD
    assert play.state.score == 0
    assert upper.x < 0


def test_restart_one_second_after_death(play, store):
    old_bird, old_field = play.bird, play.field
    play.bird.y = GAME_HEIGHT
    play.update(16)

    play.update(984)
    assert play.phase is Phase.DEAD
    assert play.bird is old_bird

    play.update(16)

    assert play.bird is not old_bird
    assert play.field is not old_field
    assert play.phase is Phase.RUNNING
    assert play.state.score == 0
    assert play.state.difficulty == "easy"
    assert len(play.field.pipes) == 8


def test_game_over_is_idempotent(play):
    play.game_over()
    play.game_over()
    assert len(play.timers.pending()) == 1


def _coast(play):
    """Keep the bird level and out of the pipes' way."""
    play.bird.gravity = 0
    play.world.colliders.clear()


def test_difficulty_follows_score_through_recycling(play):
    _coast(play)
    pool = play.field.pipes
    seen = []

    for _ in range(5000):
        play.update(50)
        seen.append((play.state.score, play.state.difficulty))
        assert play.field.pipes == pool
        for upper, lower in play.field.pairs():
            assert upper.x == lower.x
        if play.state.score >= 21:
            break

    assert play.state.score >= 21
    for score, tier in seen:
        if score < 10:
            assert tier == "easy"
        elif score < 20:
            assert tier == "normal"
        else:
            assert tier == "hard"
    assert (10, "normal") in seen
    assert (20, "hard") in seen


def test_pause_then_countdown_resume(scenes, play):
    # the last countdown tick also steps physics for a full second
    _coast(play)
    play.bird.vy = 0
    play.pause()

    assert play.state.is_paused
    assert play.phase is Phase.PAUSED
    assert scenes.is_paused("play")
    assert scenes.is_running("pause")
    assert play.world.paused

    play.flap()
    assert play.bird.vy == 0

    scenes.get("pause").choose(0)   # Continue
    assert not scenes.is_running("pause")
    assert play.countdown_text.text == "Resume in: 3"

    scenes.update(1000)
    assert play.countdown_text.text == "Resume in: 2"
    scenes.update(1000)
    assert play.countdown_text.text == "Resume in: 1"
    assert play.state.is_paused
    play.flap()
    assert play.bird.vy == 0

    scenes.update(1000)
    assert not play.state.is_paused
    assert play.countdown_text.text == ""
    assert not play.world.paused
    assert play.phase is Phase.RUNNING
    assert play.timers.pending() == []

    play.flap()
    assert play.bird.vy == -300


def test_paused_scene_does_not_tick(scenes, play):
    play.pause()
    y = play.bird.y
    scenes.update(5000)
    assert play.bird.y == y
    assert play.countdown_text.text == ""


def test_pause_ignored_when_dead(scenes, play):
    play.game_over()
    play.pause()
    assert not play.state.is_paused
    assert not scenes.is_running("pause")


def test_keyboard_and_pointer_input(scenes, play):
    play.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
    assert play.bird.vy == -300

    play.bird.vy = 0
    play.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(10, 10), button=1))
    assert play.bird.vy == -300

    play.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN,
                                         pos=play.pause_button.center, button=1))
    assert play.state.is_paused
    assert scenes.is_running("pause")


def test_best_score_label_reads_store(store, scenes):
    store.set("bestScore", "42")
    scenes.restart("play")
    assert scenes.get("play").score_board.best_score_text.text == "Best Score: 42"


def test_death_during_countdown_keeps_physics_frozen(scenes, play):
    play.pause()
    scenes.get("pause").resume_play()
    scenes.update(2500)
    assert play.countdown_text.text == "Resume in: 1"

    play.bird.y = GAME_HEIGHT
    play.update(16)
    assert play.phase is Phase.DEAD

    play.update(600)

    assert play.world.paused
    assert play.state.is_paused
    assert play.countdown_text.text == ""
    assert play.phase is Phase.DEAD


def test_tap_on_pause_button_does_not_flap(scenes, play):
    play.bird.vy = 0
    play.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=play.pause_button.center,
                                         button=1, touch=True))
    play.handle_event(pygame.event.Event(pygame.FINGERDOWN, x=0.95, y=0.95, finger_id=0,
                                         touch_id=0))

    assert play.state.is_paused
    assert play.bird.vy == 0


def test_mouse_wheel_does_not_flap(play):
    play.bird.vy = 0
    for button in (4, 5):
        play.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(10, 10), button=button))
    assert play.bird.vy == 0

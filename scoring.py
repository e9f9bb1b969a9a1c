from hud import TextNode
from settings import BEST_SCORE_KEY


def read_best_score(store, key=BEST_SCORE_KEY):
    """Stored best score, or None if absent or not a number."""
    raw = store.get(key)
    if raw is None:
        return None
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


class ScoreBoard:
    def __init__(self, state, store, key=BEST_SCORE_KEY):
        self.state = state
        self.store = store
        self.key = key
        self.score_text = TextNode(16, 16, f"Score: {state.score}", size="large")
        self.best_score_text = TextNode(16, 50, f"Best Score: {self.best_score}", size="small")

    @property
    def best_score(self) -> int:
        best = read_best_score(self.store, self.key)
        return best or 0

    def on_pass_through(self):
        self.state.score += 1
        self.score_text.set_text(f"Score: {self.state.score}")
        self.save_best_score()

    def save_best_score(self):
        best = read_best_score(self.store, self.key)
        if best is None or self.state.score > best:
            self.store.set(self.key, str(self.state.score))
            self.best_score_text.set_text(f"Best Score: {self.state.score}")

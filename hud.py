import pygame

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
HOVER = (255, 200, 0)


class TextNode:
    """On-screen text. origin is the anchor as fractions of the rendered size."""

    def __init__(self, x, y, text="", size="large", color=BLACK, origin=(0, 0)):
        self.x = x
        self.y = y
        self.text = text
        self.size = size
        self.color = color
        self.origin = origin
        self.rect = None  # filled in on draw, used for pointer hit tests

    def set_text(self, text):
        self.text = str(text)
        return self

    def draw(self, surface, fonts, color=None):
        if not self.text:
            self.rect = None
            return
        surf = fonts[self.size].render(self.text, True, color or self.color)
        x = self.x - surf.get_width() * self.origin[0]
        y = self.y - surf.get_height() * self.origin[1]
        self.rect = surface.blit(surf, (x, y))

    def hit(self, pos):
        return self.rect is not None and self.rect.collidepoint(pos)


def title_text(ctx, text, dy=0):
    cx, cy = ctx.screen_center
    return TextNode(cx, cy + dy, text, color=WHITE, origin=(0.5, 1))


def make_menu(ctx, labels, spacing=42):
    """Centered column of menu items, one TextNode per label."""
    cx, cy = ctx.screen_center
    top = cy - spacing * (len(labels) - 1) / 2
    return [TextNode(cx, top + i * spacing, label, color=WHITE, origin=(0.5, 0.5))
            for i, label in enumerate(labels)]


def load_fonts(font_path):
    try:
        fonts = {
            "large": pygame.font.Font(str(font_path), 20),
            "small": pygame.font.Font(str(font_path), 12),
        }
        print("Font loaded successfully")
    except (OSError, pygame.error) as e:
        print(f"Font failed, using default: {e}")
        fonts = {
            "large": pygame.font.Font(None, 35),
            "small": pygame.font.Font(None, 25),
        }
    return fonts

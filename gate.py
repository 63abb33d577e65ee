import pygame

from config import GATE_SIZE, GATE_BORDER, GATE_RADIUS, BLACK


class RefillGate:
    """Gas-station button shown over the road while the tank is empty."""

    def __init__(self, width, height, visible=True):
        self.rect = pygame.Rect(0, 0, GATE_SIZE, GATE_SIZE)
        self.visible = visible
        self.layout(width, height)

    def layout(self, width, height):
        self.rect.center = (width // 2, height // 2)

    def show(self):
        self.visible = True

    def hide(self):
        self.visible = False

    def hit(self, pos):
        return self.visible and self.rect.collidepoint(pos)

    def draw(self, surf, sprite):
        if not self.visible:
            return
        inner = self.rect.inflate(-2 * GATE_BORDER, -2 * GATE_BORDER)
        if sprite.ready:
            sprite.draw(surf, *inner)
        else:
            pygame.draw.rect(surf, sprite.color, inner, border_radius=GATE_RADIUS)
        pygame.draw.rect(surf, BLACK, self.rect, GATE_BORDER, border_radius=GATE_RADIUS)

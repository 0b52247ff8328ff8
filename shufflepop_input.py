"""Tap detection: every input source collapses to one tap per tick"""
from typing import Iterable
import pygame

TAP_KEYS = (pygame.K_SPACE, pygame.K_RETURN, pygame.K_KP_ENTER)
TAP_BUTTONS = (1, 3)  # left, right


class TapDetector:
    def __init__(self):
        self.taps = 0
    def is_tap(self, e) -> bool:
        if e.type == pygame.KEYDOWN: return e.key in TAP_KEYS
        if e.type == pygame.MOUSEBUTTONDOWN: return e.button in TAP_BUTTONS
        return e.type == pygame.FINGERDOWN
    def update(self, events: Iterable) -> bool:
        tapped = any(self.is_tap(e) for e in events)
        if tapped: self.taps += 1
        return tapped

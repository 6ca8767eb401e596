"""
Login Screen
============
Stacks the vibrant background behind a centered, vertically scrollable
column holding the glass logo and the glass login card.

Nothing here reacts to input: the text fields and the button only offer
what Qt gives them by default (focus, typing, pressed state).
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtGui import QFont, QPalette, QResizeEvent
from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel, QScrollArea, QFrame

from glasslogin.app.ui.background import VibrantBackground
from glasslogin.app.ui.glass import GlassCard, GlassInput, GlassButton, GlassLogo
from glasslogin.app.ui.style import (
    Rgba, WHITE, SUBTITLE_COLOR,
    TITLE_TEXT, TITLE_FONT_SIZE, SUBTITLE_TEXT, SUBTITLE_FONT_SIZE,
    USERNAME_HINT, PASSWORD_HINT, LOGIN_LABEL,
    SCREEN_PADDING_H, LOGO_TO_CARD_SPACING, TITLE_TO_SUBTITLE_SPACING,
    SUBTITLE_TO_INPUT_SPACING, INPUT_TO_INPUT_SPACING, INPUT_TO_BUTTON_SPACING,
    make_font,
)

logger = logging.getLogger(__name__)


def _make_label(text: str, font: QFont, color: Rgba, parent: QWidget | None = None) -> QLabel:
    label = QLabel(text, parent)
    label.setFont(font)
    label.setAlignment(Qt.AlignmentFlag.AlignHCenter)
    label.setWordWrap(True)
    palette = label.palette()
    palette.setColor(QPalette.ColorRole.WindowText, color.to_qcolor())
    label.setPalette(palette)
    return label


class GlassLoginScreen(QWidget):
    """The whole login screen: background, logo and glass card."""
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)

        # 1. Background (bottom of the stack)
        self.background = VibrantBackground(self)

        # 2. Card contents
        self.title_label = _make_label(TITLE_TEXT, make_font(TITLE_FONT_SIZE, bold=True), WHITE)
        self.subtitle_label = _make_label(SUBTITLE_TEXT, make_font(SUBTITLE_FONT_SIZE), SUBTITLE_COLOR)
        self.username_input = GlassInput(USERNAME_HINT)
        self.password_input = GlassInput(PASSWORD_HINT)
        self.login_button = GlassButton(LOGIN_LABEL)

        form = QVBoxLayout()
        form.setContentsMargins(0, 0, 0, 0)
        form.setSpacing(0)
        form.addWidget(self.title_label)
        form.addSpacing(TITLE_TO_SUBTITLE_SPACING)
        form.addWidget(self.subtitle_label)
        form.addSpacing(SUBTITLE_TO_INPUT_SPACING)
        form.addWidget(self.username_input)
        form.addSpacing(INPUT_TO_INPUT_SPACING)
        form.addWidget(self.password_input)
        form.addSpacing(INPUT_TO_BUTTON_SPACING)
        form.addWidget(self.login_button)

        self.card = GlassCard(form)
        self.card.set_backdrop_source(self.background)
        self.logo = GlassLogo()

        # 3. Centered scrollable column (top of the stack)
        column = QWidget()
        v = QVBoxLayout(column)
        v.setContentsMargins(SCREEN_PADDING_H, 0, SCREEN_PADDING_H, 0)
        v.setSpacing(0)
        v.addStretch(1)
        v.addWidget(self.logo, 0, Qt.AlignmentFlag.AlignHCenter)
        v.addSpacing(LOGO_TO_CARD_SPACING)
        v.addWidget(self.card)
        v.addStretch(1)

        self.scroll_area = QScrollArea(self)
        self.scroll_area.setFrameShape(QFrame.Shape.NoFrame)
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.scroll_area.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAsNeeded)
        self.scroll_area.setAutoFillBackground(False)
        self.scroll_area.viewport().setAutoFillBackground(False)
        self.scroll_area.setWidget(column)
        # setWidget() enables background filling
        column.setAutoFillBackground(False)

        # the card moves relative to the background while scrolling
        self.scroll_area.verticalScrollBar().valueChanged.connect(lambda *_: self.card.update())

        logger.debug("Login screen constructed.")

    def inputs(self) -> list[GlassInput]:
        return [self.username_input, self.password_input]

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        self.background.setGeometry(self.rect())
        self.scroll_area.setGeometry(self.rect())

import pytest
from PySide6.QtCore import QPoint
from PySide6.QtGui import QColor, QFont, QPalette
from PySide6.QtWidgets import QWidget

from glasslogin.app.ui.background import VibrantBackground, GradientOrb
from glasslogin.app.ui.glass import GlassCard, GlassInput, GlassButton, GlassLogo, blur_on_dots
from glasslogin.app.ui.gradient import orb_gradient
from glasslogin.app.ui.login_screen import GlassLoginScreen
from glasslogin.app.ui.style import ORB_TOP_LEFT_COLOR, ORB_BOTTOM_RIGHT_COLOR, BUTTON_HEIGHT, LOGO_DIAMETER


def test_screen_tree(qapp):
    screen = GlassLoginScreen()

    assert len(screen.findChildren(GlassCard)) == 1
    assert len(screen.findChildren(GlassLogo)) == 1
    assert len(screen.findChildren(GlassButton)) == 1

    inputs = screen.findChildren(GlassInput)
    assert len(inputs) == 2
    assert sorted(i.hint() for i in inputs) == ["Password", "Username"]
    assert all(i.text() == "" for i in inputs)

    assert screen.login_button.text() == "LOGIN"
    assert [i.hint() for i in screen.inputs()] == ["Username", "Password"]


def test_card_holds_form(qapp):
    screen = GlassLoginScreen()
    card = screen.card
    for widget in (screen.title_label, screen.subtitle_label, screen.username_input,
                   screen.password_input, screen.login_button):
        assert card.isAncestorOf(widget)
    assert not card.isAncestorOf(screen.logo)
    assert screen.title_label.text() == "Glassmorphism UI"


def test_small_viewport_scrolls(shown):
    screen = shown(GlassLoginScreen(), 430, 300)
    assert screen.scroll_area.verticalScrollBar().maximum() > 0

    shown(screen, 430, 1400)
    assert screen.scroll_area.verticalScrollBar().maximum() == 0


def test_content_centered_when_it_fits(shown):
    screen = shown(GlassLoginScreen(), 430, 1400)
    logo_top = screen.logo.mapTo(screen, screen.logo.rect().topLeft()).y()
    card_bottom = screen.card.mapTo(screen, screen.card.rect().bottomLeft()).y()
    assert logo_top > 0
    assert abs(logo_top - (screen.height() - card_bottom)) <= 2


def test_widget_sizes(shown):
    screen = shown(GlassLoginScreen(), 430, 860)
    assert screen.login_button.height() == BUTTON_HEIGHT
    assert screen.logo.width() == screen.logo.height() == LOGO_DIAMETER
    # card spans the width minus the horizontal padding
    assert screen.card.width() == 430 - 2 * 24


def test_background_orbs(shown):
    background = shown(VibrantBackground(), 430, 860)
    top_left, bottom_right = background.orbs()
    assert top_left.gradient() == orb_gradient(ORB_TOP_LEFT_COLOR)
    assert bottom_right.gradient() == orb_gradient(ORB_BOTTOM_RIGHT_COLOR)
    assert (top_left.x(), top_left.y()) == (0, -400)
    assert (bottom_right.x(), bottom_right.y()) == (430 + 30 - 800, 860 + 50 - 800)

    background.resize(600, 1000)
    shown(background)
    assert (bottom_right.x(), bottom_right.y()) == (600 + 30 - 800, 1000 + 50 - 800)


def test_orb_gradient_is_stable_across_instances(qapp):
    assert GradientOrb(ORB_TOP_LEFT_COLOR).gradient() == GradientOrb(ORB_TOP_LEFT_COLOR).gradient()


def test_backdrop_render(qapp):
    background = VibrantBackground()
    background.resize(2000, 2000)
    image = background.render_backdrop()
    assert (image.width(), image.height()) == (2000, 2000)
    # away from both orbs only the base color is visible
    assert image.pixelColor(1000, 1000) == QColor(67, 120, 38)
    # the cyan orb tints the top edge
    assert image.pixelColor(400, 1).blue() > 38
    assert background.render_backdrop() is image


def test_backdrop_invalidated_on_resize(shown):
    background = shown(VibrantBackground(), 300, 300)
    notified = []
    background.backdrop_changed.connect(lambda: notified.append(True))
    background.resize(320, 300)
    shown(background)
    assert notified
    assert background.render_backdrop().width() == 320


def test_card_blurs_backdrop(shown):
    screen = shown(GlassLoginScreen(), 430, 860)
    card = screen.card
    assert card.backdrop_source() is screen.background

    blurred = card.blurred_backdrop()
    assert blurred is not None
    assert (blurred.width(), blurred.height()) == (card.width(), card.height())
    assert card.blurred_backdrop() is blurred

    rect = card.backdrop_rect()
    assert rect.topLeft() == card.mapTo(screen, card.rect().topLeft())


def test_card_without_backdrop_source(qapp):
    card = GlassCard(QWidget())
    assert card.backdrop_source() is None
    assert card.blurred_backdrop() is None


def test_screen_paints(shown):
    screen = shown(GlassLoginScreen(), 430, 860)
    pixmap = screen.grab()
    assert not pixmap.isNull()
    assert pixmap.width() == 430


def test_button_pressed_state_paints(shown):
    button = shown(GlassButton("LOGIN"), 300, 55)
    button.setDown(True)
    assert not button.grab().isNull()
    clicks = []
    button.clicked.connect(lambda: clicks.append(True))
    button.click()
    assert clicks == [True]


def test_blur_on_icon_dots():
    dots = blur_on_dots()
    assert all(0 < x < 24 and 0 < y < 24 for x, y, _ in dots)
    largest = [(x, y) for x, y, r in dots if r == max(r for *_, r in dots)]
    assert sorted(largest) == [(10.0, 10.0), (10.0, 14.0), (14.0, 10.0), (14.0, 14.0)]
    # symmetric around the icon center
    assert {(24 - x, 24 - y, r) for x, y, r in dots} == set(dots)


@pytest.mark.parametrize("hint", ["Username", "Password"])
def test_input_accepts_text(qapp, hint):
    field = GlassInput(hint)
    field.line_edit.setText("someone")
    assert field.text() == "someone"
    assert field.hint() == hint


def _blend(under, over, alpha):
    return under * (1 - alpha) + over * alpha


def test_card_paints_blurred_backdrop_under_tint(shown):
    screen = shown(GlassLoginScreen(), 430, 860)
    card = screen.card
    painted = screen.grab().toImage()
    blurred = card.blurred_backdrop()

    # inside the card padding, above the title
    local = card.rect().center()
    local.setY(10)
    at = card.mapTo(screen, local)
    expected = blurred.pixelColor(local)
    actual = painted.pixelColor(at)
    for channel in ("red", "green", "blue"):
        value = getattr(expected, channel)()
        assert abs(getattr(actual, channel)() - _blend(value, 255, 0.1)) <= 2


def test_card_clips_backdrop_to_rounded_corner(shown):
    screen = shown(GlassLoginScreen(), 430, 860)
    card = screen.card
    painted = screen.grab().toImage()
    backdrop = screen.background.render_backdrop()

    # outside the 30px corner arc, the background shows unblurred and untinted
    at = card.mapTo(screen, card.rect().topLeft()) + QPoint(2, 2)
    actual, expected = painted.pixelColor(at), backdrop.pixelColor(at)
    for channel in ("red", "green", "blue"):
        assert abs(getattr(actual, channel)() - getattr(expected, channel)()) <= 2


def test_input_is_frameless_and_padded(qapp):
    field = GlassInput("Username")
    assert not field.line_edit.hasFrame()
    margins = field.layout().contentsMargins()
    assert (margins.left(), margins.top(), margins.right(), margins.bottom()) == (20, 15, 20, 15)

    palette = field.line_edit.palette()
    assert palette.color(QPalette.ColorRole.PlaceholderText).alphaF() == pytest.approx(0.54, abs=0.01)
    assert palette.color(QPalette.ColorRole.Base).alpha() == 0
    assert palette.color(QPalette.ColorRole.Text) == QColor(255, 255, 255)


def test_button_label_font(qapp):
    font = GlassButton("LOGIN").font()
    assert font.bold()
    assert font.letterSpacing() == pytest.approx(1.2)
    assert font.letterSpacingType() == QFont.SpacingType.AbsoluteSpacing


def test_logo_paints_fill(shown):
    logo = shown(GlassLogo())
    image = logo.grab().toImage()
    window = logo.palette().color(QPalette.ColorRole.Window)
    # inside the circle, above the icon
    actual = image.pixelColor(LOGO_DIAMETER // 2, 5)
    assert abs(actual.red() - _blend(window.red(), 255, 0.2)) <= 3
    # outside the circle the window background is untouched
    assert image.pixelColor(1, 1) == window

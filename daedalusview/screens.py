"""Switching between the application's screens, with a fade transition and exit prompt."""

from __future__ import annotations

from typing import Mapping, Optional

from .model import InputState, Key, Screen

FADE_IN_STEP = 0.10
FADE_OUT_STEP = 0.05


class ScreenHandler:
    """One screen of the application; subclasses override what they need.

    The base class keeps track of its own life cycle: whether it is loaded,
    how many frames it has been updated and drawn, and which screen it asks
    to go to next (``next_screen``).
    """

    loaded: bool = False
    frames: int = 0
    draws: int = 0
    next_screen: Screen = Screen.UNKNOWN

    def load(self) -> None:
        """Prepare the screen before it is shown."""
        self.loaded = True
        self.frames = 0
        self.draws = 0
        self.next_screen = Screen.UNKNOWN

    def update(self, inputs: InputState) -> None:
        """Advance the screen by one frame."""
        self.frames += 1

    def draw(self) -> None:
        """Render the screen."""
        self.draws += 1

    def unload(self) -> None:
        """Release what :meth:`load` prepared."""
        self.loaded = False

    def finish(self) -> Screen:
        """The screen to go to next, or ``Screen.UNKNOWN`` to stay."""
        return self.next_screen


class ScreenManager:
    """Runs the current screen and moves between screens."""

    def __init__(self, screens: Mapping[Screen, ScreenHandler], starting: Screen = Screen.LOGO,
                 draw_logo: str = "t") -> None:
        self.screens = dict(screens)
        if draw_logo == "f" and starting == Screen.LOGO:
            starting = Screen.TITLE
        self.current = Screen(starting)
        self.trans_alpha = 0.0
        self.on_transition = False
        self.trans_fade_out = False
        self.trans_from: Screen = Screen.UNKNOWN
        self.trans_to: Screen = Screen.UNKNOWN
        self.exit_window = False
        self.exit_request = False
        self._load(self.current)

    def _handler(self, screen: Screen) -> Optional[ScreenHandler]:
        return self.screens.get(screen)

    def _load(self, screen: Screen) -> None:
        handler = self._handler(screen)
        if handler is not None:
            handler.load()

    def _unload(self, screen: Screen) -> None:
        handler = self._handler(screen)
        if handler is not None:
            handler.unload()

    @property
    def fade_alpha(self) -> float:
        """Opacity of the black overlay drawn over the screen this frame."""
        return self.trans_alpha if self.on_transition else 0.0

    def change_to(self, screen: Screen) -> None:
        """Switch screens at once, without a fade."""
        self._unload(self.current)
        self._load(screen)
        self.current = Screen(screen)

    def transition_to(self, screen: Screen) -> None:
        """Start fading towards ``screen``."""
        self.on_transition = True
        self.trans_fade_out = False
        self.trans_from = self.current
        self.trans_to = Screen(screen)
        self.trans_alpha = 0.0

    def update_transition(self) -> None:
        """Advance the fade; screens are swapped at full black."""
        if not self.trans_fade_out:
            self.trans_alpha += FADE_IN_STEP
            if self.trans_alpha > 1.01:
                self.trans_alpha = 1.0
                self._unload(self.trans_from)
                self._load(self.trans_to)
                self.current = self.trans_to
                self.trans_fade_out = True
        else:
            self.trans_alpha -= FADE_OUT_STEP
            if self.trans_alpha < -0.01:
                self.trans_alpha = 0.0
                self.trans_fade_out = False
                self.on_transition = False
                self.trans_from = Screen.UNKNOWN
                self.trans_to = Screen.UNKNOWN

    def _update_screen(self, inputs: InputState) -> bool:
        handler = self._handler(self.current)
        if handler is None:
            return False
        handler.update(inputs)
        target = handler.finish()
        current = self.current
        if current == Screen.LOGO:
            if target != Screen.UNKNOWN:
                self.transition_to(Screen.TITLE)
        elif current == Screen.SETTINGS:
            if target == Screen.REINIT:
                return True
            if target != Screen.UNKNOWN:
                self.transition_to(target)
        elif current == Screen.PROJECTMAIN:
            if target == Screen.OPENPROJECT:
                self.change_to(Screen.OPENPROJECT)
            elif target != Screen.UNKNOWN:
                self.transition_to(target)
        elif current == Screen.OPENPROJECT:
            if target == Screen.PROJECTMAIN:
                self.change_to(Screen.PROJECTMAIN)
            elif target != Screen.UNKNOWN:
                self.transition_to(target)
        elif current in (Screen.TITLE, Screen.EDITOBJECT, Screen.MATERIALS):
            if target != Screen.UNKNOWN:
                self.transition_to(target)
        return False

    def frame(self, inputs: InputState, close_requested: bool = False) -> bool:
        """Update and draw one frame; True when the settings ask for a restart."""
        if close_requested or inputs.key_pressed(Key.ESCAPE):
            self.exit_request = True
        if self.exit_request:
            if inputs.key_pressed(Key.Y):
                self.exit_window = True
            elif inputs.key_pressed(Key.N) or Key.ESCAPE in inputs.repeated:
                self.exit_request = False
        elif not self.on_transition:
            if self._update_screen(inputs):
                return True
        else:
            self.update_transition()

        handler = self._handler(self.current)
        if handler is not None:
            handler.draw()
        return False

    def close(self) -> None:
        """Unload the current screen."""
        self._unload(self.current)
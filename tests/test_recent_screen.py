"""
Tests for the recent locations screen.

The screen is driven directly: init() commands are run by hand and their
results fed back through update().
"""

from clima.tui.messages import (
    ActionRequested,
    ListHighlighted,
    ListSelected,
    NewSearchRequested,
    QuitRequested,
    RecentEmpty,
    RecentPicked,
)
from clima.tui.screens import RecentScreen, RecentView
from clima.tui.screens.recent import RecentLoaded, RecentLoadFailed

from tests.conftest import QUITO, SALINAS, SALINAS_EC, footer_text, press


def _loaded(screen: RecentScreen):
    """Run the load command and feed its result back; return the follow-up messages."""
    (command,) = screen.init()
    assert command.blocking
    return [c.run() for c in screen.update(command.run())]


class TestLoading:
    """Test what happens once the recent list is read."""

    def test_empty_list_hands_off_to_search(self, store):
        """Test that no recent locations signals RecentEmpty."""
        assert _loaded(RecentScreen(store)) == [RecentEmpty()]

    def test_single_location_is_auto_picked(self, store):
        """Test that one recent location is picked without asking."""
        store.add(SALINAS)
        assert _loaded(RecentScreen(store)) == [RecentPicked(SALINAS)]

    def test_several_locations_are_listed(self, store):
        """Test that two or more locations are shown for picking."""
        store.add(SALINAS)
        store.add(QUITO)
        screen = RecentScreen(store)

        assert _loaded(screen) == []
        assert screen.view_state is RecentView.LISTING
        assert "Recent locations:" in screen.view().plain
        assert screen.option_labels() == ["Quito, Ecuador", "Salinas, United States"]
        assert screen.selection.selected == QUITO

    def test_load_failure_shows_error(self, store):
        """Test that a corrupt file moves the screen to its error view."""
        store.path.parent.mkdir(parents=True)
        store.path.write_text("[{]", encoding="utf-8")
        screen = RecentScreen(store)

        assert _loaded(screen) == []
        assert screen.view_state is RecentView.ERROR
        assert "Could not load recent locations" in screen.view().plain
        assert screen.option_labels() == []

    def test_non_utf8_file_shows_error(self, store):
        """Test that a recent file with bytes that are not UTF-8 moves the screen to its error view."""
        store.path.parent.mkdir(parents=True)
        store.path.write_bytes(b"\xff\xfe[garbage")
        screen = RecentScreen(store)

        assert _loaded(screen) == []
        assert screen.view_state is RecentView.ERROR


class TestKeys:
    """Test key bindings and option list events in the listing."""

    def _listing(self):
        screen = RecentScreen(store=None)
        screen.update(RecentLoaded((QUITO, SALINAS, SALINAS_EC)))
        return screen

    def test_cursor_and_pick(self):
        """Test moving down twice and picking."""
        screen = self._listing()
        press(screen, "down")
        press(screen, "j")
        (command,) = press(screen, "enter")
        assert command.run() == RecentPicked(SALINAS_EC)

    def test_cursor_up(self):
        """Test that k/up move back and stop at the top."""
        screen = self._listing()
        press(screen, "down")
        press(screen, "k")
        press(screen, "up")
        assert screen.selection.selected == QUITO

    def test_new_search(self):
        """Test that n asks for the search screen."""
        (command,) = press(self._listing(), "n")
        assert command.run() == NewSearchRequested()

    def test_quit(self):
        """Test that q and ctrl+c quit."""
        for key in ("q", "ctrl+c"):
            (command,) = press(self._listing(), key)
            assert command.run() == QuitRequested()

    def test_unbound_key_ignored(self):
        """Test that other keys do nothing."""
        assert press(self._listing(), "x") == []

    def test_error_view_only_quits(self):
        """Test that n and enter are inactive in the error view."""
        screen = RecentScreen(store=None)
        screen.update(RecentLoadFailed("boom"))
        assert press(screen, "n") == []
        assert press(screen, "enter") == []
        assert screen.update(ListSelected(0)) == []
        (command,) = press(screen, "q")
        assert command.run() == QuitRequested()
        assert footer_text(screen) == "q quit"

    def test_footer_bindings(self):
        """Test the listing key help."""
        assert footer_text(self._listing()) == "↑ up • ↓ down • enter pick • n new search • q quit"

    def test_highlight_follows_option_list(self):
        """Test that a highlight from the option list moves the selection, clamped to the list."""
        screen = self._listing()
        assert screen.update(ListHighlighted(1)) == []
        assert screen.selection.selected == SALINAS
        screen.update(ListHighlighted(9))
        assert screen.selection.selected == SALINAS_EC

    def test_option_selected_picks(self):
        """Test that selecting a row in the option list picks that location."""
        (command,) = self._listing().update(ListSelected(2))
        assert command.run() == RecentPicked(SALINAS_EC)

    def test_inactive_action_ignored(self):
        """Test that an action with no binding in the current view does nothing."""
        screen = RecentScreen(store=None)
        screen.update(RecentLoadFailed("boom"))
        assert screen.update(ActionRequested("pick")) == []
        assert screen.update(ActionRequested("refresh")) == []

"""
Tests for the tkinter window.

The appearance mapping is pure and always tested. Window tests need a
display and are skipped without one.
"""
import pytest

tk = pytest.importorskip("tkinter")

from minesweeper import Game
from minesweeper.gui import CELL_BG, MinesweeperWindow, cell_appearance


class TestCellAppearance:
    """Snapshot code to button look."""

    def test_hidden(self) -> None:
        look = cell_appearance(-1)
        assert look.text == ''
        assert look.relief == 'raised'

    def test_flag(self) -> None:
        look = cell_appearance(-2)
        assert look.text == '🚩'
        assert look.relief == 'raised'

    def test_mine_is_highlighted(self) -> None:
        look = cell_appearance(9)
        assert look.text == '💣'
        assert look.bg == 'red'

    def test_blank(self) -> None:
        look = cell_appearance(0)
        assert look.text == ''
        assert look.relief == 'sunken'
        assert look.bg == CELL_BG

    @pytest.mark.parametrize(
        "count, color", [(1, 'blue'), (2, 'green'), (3, 'red'), (8, 'gray')]
    )
    def test_numbers_are_colored(self, count: int, color: str) -> None:
        look = cell_appearance(count)
        assert look.text == str(count)
        assert look.fg == color


@pytest.fixture
def root():
    try:
        root = tk.Tk()
    except tk.TclError as e:
        pytest.skip(f"No display available: {e}")
    root.withdraw()
    yield root
    root.destroy()


class TestMinesweeperWindow:
    """Window wiring against a real Tk root."""

    def test_builds_button_grid(self, root) -> None:
        window = MinesweeperWindow(Game(3, 4, 2), root=root)
        assert len(window.cell_buttons) == 3
        assert len(window.cell_buttons[0]) == 4
        assert window.mines_label.cget('text') == 'Mines: 2'
        assert window.status_label.cget('text') == 'Playing...'

    def test_right_click_flags(self, root, corner_mine_game: Game) -> None:
        window = MinesweeperWindow(corner_mine_game, root=root)
        window._on_cell_right_click(0, 0)

        assert window.cell_buttons[0][0].cget('text') == '🚩'
        assert window.mines_label.cget('text') == 'Mines: 0'

    def test_win_disables_cells(self, root, corner_mine_game: Game) -> None:
        window = MinesweeperWindow(corner_mine_game, root=root)
        window._on_cell_click(3, 3)

        assert window.status_label.cget('text') == 'You Won!'
        assert window.reset_button.cget('text') == '😎'
        assert str(window.cell_buttons[0][0].cget('state')) == tk.DISABLED

    def test_loss_shows_mines(self, root, plant) -> None:
        game = Game(3, 3, 2)
        plant(game, (0, 0), (2, 2))
        window = MinesweeperWindow(game, root=root)
        window._on_cell_click(2, 2)

        assert window.status_label.cget('text') == 'Game Over!'
        assert window.cell_buttons[0][0].cget('text') == '💣'

    def test_reset_restores_board(self, root, corner_mine_game: Game) -> None:
        window = MinesweeperWindow(corner_mine_game, root=root)
        window._on_cell_click(0, 0)
        window._on_reset_click()

        assert corner_mine_game.is_playing is True
        assert window.status_label.cget('text') == 'Playing...'
        assert str(window.cell_buttons[0][0].cget('state')) == tk.NORMAL

"""
text shown to the players: status line, turn pill, cell labels
"""
from .game_logic import Draw, GameState, Mark, Won


def status_message(state: GameState) -> str:
    status = state.status
    if isinstance(status, Won):
        return f"{status.player.value} wins"
    if isinstance(status, Draw):
        return "Draw"
    return f"Player {state.active_player.value}'s turn"


def turn_label(state: GameState) -> str:
    # pill is hidden once the game is over
    if state.is_over:
        return ""
    return f"Turn: {state.active_player.value}"


def cell_label(state: GameState, index: int) -> str:
    """
    accessible name for one cell, numbered from 1 like the keyboard keys
    """
    mark = state.board[index]
    if mark is not Mark.EMPTY:
        return f"Cell {index + 1}, {mark.value}"
    if state.is_over:
        return f"Cell {index + 1}, empty, disabled"
    return f"Cell {index + 1}, empty"

"""
Rules engine for N x N tic-tac-toe.
Handles board state, move validation, turn order, and win/draw detection.
"""

from .config import EngineConfig
from .errors import TicTacToeError, InvalidSize, InvalidMarks, InvalidMove
from .game_state import GameState, GameStatus, EngineState, Move
from .move_validator import MoveValidator, MoveViolation, ValidationResult
from .win_checker import WinChecker
from .engine import GameEngine, GameSnapshot

__version__ = "1.0.0"

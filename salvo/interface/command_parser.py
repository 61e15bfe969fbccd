"""Coordinate command parser for human players.

This module parses typed targets like "3, 7" or "3 7" into validated
(row, col) coordinates that can be handed to the engine.
"""

import re
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, ValidationError, ValidationInfo, field_validator

from ..utils import BOARD_SIZE

# Tokens may be separated by a comma, whitespace, or both
TOKEN_SPLIT_RE = re.compile(r"\s*,\s*|\s+")
NUMBER_START_RE = re.compile(r"^[+-]?\d")

HELP_COMMANDS = ("help", "h", "?")
QUIT_COMMANDS = ("quit", "exit", "q")


class ErrorType(Enum):
    """Classification of target input errors."""
    UNKNOWN_COMMAND = "unknown_command"
    SYNTAX_ERROR = "syntax_error"
    OUT_OF_RANGE = "out_of_range"


class CoordinateParseError(Exception):
    """Raised when target parsing fails with classification."""

    def __init__(self, error_type: ErrorType, message: str):
        """Initialize parse error.

        Args:
            error_type: Classification of the error
            message: Human-readable error message
        """
        self.error_type = error_type
        self.message = message
        super().__init__(message)


class TargetModel(BaseModel):
    """A target coordinate.

    The board size is read from the validation context
    (``{"board_size": n}``) and defaults to BOARD_SIZE.
    """

    row: int = Field(ge=0, description="Zero-based row")
    col: int = Field(ge=0, description="Zero-based column")

    @field_validator("row", "col")
    @classmethod
    def within_board(cls, v: int, info: ValidationInfo) -> int:
        """Reject coordinates past the far edge of the board."""
        size = (info.context or {}).get("board_size", BOARD_SIZE)
        if v >= size:
            raise ValueError(f"must be less than {size}")
        return v


class CommandParser:
    """Parse text commands into target coordinates."""

    def __init__(self, board_size: int = BOARD_SIZE):
        """Initialize parser.

        Args:
            board_size: Side length of the board being targeted
        """
        self.board_size = board_size

    def parse(self, command: str) -> Optional[tuple[int, int]]:
        """Parse a command string into a (row, col) target.

        Supported formats:
        - "<row>, <col>"
        - "<row> <col>"

        Special commands (return None, handled by the caller):
        - "help", "h", "?"
        - "quit", "exit", "q"

        Args:
            command: Command string to parse

        Returns:
            (row, col) tuple, or None for a special command

        Raises:
            CoordinateParseError: If the command is not a valid target
        """
        cmd = command.strip().lower()

        if cmd in HELP_COMMANDS or cmd in QUIT_COMMANDS:
            return None

        tokens = [t for t in TOKEN_SPLIT_RE.split(cmd) if t]
        if not tokens:
            raise CoordinateParseError(ErrorType.SYNTAX_ERROR, "Empty target")

        # Anything not starting with a number is treated as a command attempt
        if not NUMBER_START_RE.match(tokens[0]):
            raise CoordinateParseError(
                ErrorType.UNKNOWN_COMMAND, f"Unknown command: '{tokens[0]}'"
            )

        if len(tokens) != 2:
            raise CoordinateParseError(
                ErrorType.SYNTAX_ERROR,
                f"Expected 2 numbers, got {len(tokens)}\nCorrect format: <row>, <col>",
            )

        try:
            target = TargetModel.model_validate(
                {"row": tokens[0], "col": tokens[1]},
                context={"board_size": self.board_size},
            )
        except ValidationError as e:
            raise self._classify(e) from e

        return target.row, target.col

    def _classify(self, error: ValidationError) -> CoordinateParseError:
        """Turn the first pydantic error into a classified parse error."""
        first = error.errors()[0]
        field_name = first["loc"][0]
        if first["type"].startswith("int_"):
            return CoordinateParseError(
                ErrorType.SYNTAX_ERROR,
                f"Invalid {field_name}: '{first['input']}' is not a whole number"
                "\nCorrect format: <row>, <col>",
            )
        return CoordinateParseError(
            ErrorType.OUT_OF_RANGE,
            f"Invalid {field_name}: {first['input']} (must be 0-{self.board_size - 1})",
        )

    def is_help(self, command: str) -> bool:
        """Return True if *command* asks for help."""
        return command.strip().lower() in HELP_COMMANDS

    def is_quit(self, command: str) -> bool:
        """Return True if *command* asks to quit."""
        return command.strip().lower() in QUIT_COMMANDS

"""Engine exceptions."""


class UnoFlipError(ValueError):
    """Base class for errors raised by the engine."""


class InvalidMoveError(UnoFlipError):
    """A player action that the current game state does not allow."""


class InvalidConfigurationError(UnoFlipError):
    """The table or game settings cannot start or continue a round."""

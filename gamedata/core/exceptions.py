"""
Exceptions raised by the game data layer.
"""


class GameDataError(Exception):
    """Base class for game data errors."""


class UnsupportedGameModelError(GameDataError):
    """
    Raised when an operation targets a game model whose collection binding
    is missing or names a collection outside the allow-list.

    Always a programming error in the model declaration.
    """

    def __init__(self, model_type: type, reason: str):
        self.model_type = model_type
        self.reason = reason
        super().__init__(f"{model_type.__name__}: {reason}")


class GameModelSerializationError(GameDataError):
    """Raised when a game model cannot be converted to or from a document."""

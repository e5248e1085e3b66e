import os


class UnitParseError(ValueError):
    """Base class for errors raised while interpreting unit data.
    """


class UnrecognizedUnitType(UnitParseError):
    """Unit path has no extension or an extension that is not a unit type.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = os.fspath(path)
        super().__init__(f'Unknown unit type: {self.path}')


class UnrecognizedUnitState(UnitParseError):
    """Unit file state message does not carry a known state.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f'Unknown unit state: {message!r}')

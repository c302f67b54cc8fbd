class InvalidPositionException(Exception):
    """ Exception raised when a raw index falls outside its table """
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

class UnknownCubieKindException(Exception):
    """ Exception raised when a cubie is requested by an unknown tag """
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

class InvalidCubeStateException(Exception):
    """ Exception raised when serialized cube state cannot be read back """
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

class InvalidCubieException(Exception):
    """ Exception raised when a cubie is given the wrong number of stickers """
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

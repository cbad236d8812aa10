class OutOfBoundsError(IndexError):
    """Raised when a grid coordinate lies outside the board (spawn row included)."""

    def __init__(self, pos, width: int, height: int):
        self.pos = pos
        super().__init__(f"Position {pos} outside board {width}x{height} (+ spawn row)")

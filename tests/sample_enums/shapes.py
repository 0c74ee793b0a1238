"""Enumerations declared through the decorator and with a generic payload."""

from extensible_enums import ExtensibleEnum, extensible_enumeration


class Shape:
    """Payload without ``__eq__``: cases compare by identity."""

    def __init__(self, sides: int):
        self.sides = sides

    def __repr__(self) -> str:
        return f"Shape({self.sides})"


@extensible_enumeration("Shape")
class Shapes(ExtensibleEnum):
    triangle = Shape(3)
    square = Shape(4)


class Swatches(ExtensibleEnum[tuple[int, int, int]]):
    black = (0, 0, 0)
    white = (255, 255, 255)
    legacy = [128, 128, 128]

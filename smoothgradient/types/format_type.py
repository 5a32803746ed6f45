# No dependencies
from enum import Enum


class ColorFormat(str, Enum):
    INT = "int"
    FLOAT = "float"
    PERCENTAGE = "percentage"


format_maxima = {
    ColorFormat.INT: 255.0,
    ColorFormat.FLOAT: 1.0,
    ColorFormat.PERCENTAGE: 100.0,
}

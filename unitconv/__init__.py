from .unitconv import UnitConv, main

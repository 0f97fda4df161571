from .classes import Affine, Linear, self_conversion


def _common():
    """temperature and length entries, built fresh so presets never share inner dicts"""

    return {
        # Temperature
        "f": {
            "f": self_conversion,
            "c": Affine(5 / 9, shift=-32.0),
            "k": Affine(5 / 9, offset=-273.15, shift=-32.0)
        },
        "c": {
            "c": self_conversion,
            "f": Affine(9 / 5, offset=32.0),
            "k": Affine(1.0, offset=273.15)
        },

        # Length
        "km": {
            "mi": Linear(0.621371),
            "km": self_conversion,
            "m": Linear(1000)
        },
        "mi": {
            "mi": self_conversion,
            "km": Linear(1.609343502101154),
            "m": Linear(1.609343502101154 * 1000)
        }
    }


# Area, every ordered pair has its own constant
_area = {
    "skm": {
        "skm": self_conversion,
        "smi": Linear(0.386102),
        "sm": Linear(1e+6),
        "sy": Linear(1.196e+6),
        "sf": Linear(1.076e+7),
        "h": Linear(100),
        "a": Linear(247.105)
    },
    "smi": {
        "skm": Linear(2.58999),
        "smi": self_conversion,
        "sm": Linear(2589990.001027),
        "sy": Linear(3.098e+6),
        "sf": Linear(2.788e+7),
        "h": Linear(259),
        "a": Linear(640)
    },
    "sm": {
        "skm": Linear(1e-6),
        "smi": Linear(3.861e-7),
        "sm": self_conversion,
        "sy": Linear(1.196),
        "sf": Linear(10.7639),
        "h": Linear(1e-4),
        "a": Linear(0.000247105)
    },
    "sy": {
        "skm": Linear(8.3613e-7),
        "smi": Linear(3.2283e-7),
        "sm": Linear(0.8361300021625),
        "sy": self_conversion,
        "sf": Linear(9),
        "h": Linear(8.3613e-5),
        "a": Linear(0.000206612)
    },
    "sf": {
        "skm": Linear(9.2903e-8),
        "smi": Linear(3.587e-8),
        "sm": Linear(0.092903),
        "sy": Linear(0.111111),
        "sf": self_conversion,
        "h": Linear(9.2903e-6),
        "a": Linear(2.2957e-5)
    },
    "h": {
        "skm": Linear(0.01),
        "smi": Linear(0.00386102),
        "sm": Linear(10000),
        "sy": Linear(11959.9),
        "sf": Linear(107639),
        "h": self_conversion,
        "a": Linear(2.47105)
    },
    "a": {
        "skm": Linear(0.00404686),
        "smi": Linear(0.0015625),
        "sm": Linear(4046.86),
        "sy": Linear(4840),
        "sf": Linear(43560),
        "h": Linear(0.404686),
        "a": self_conversion
    }
}

# demo units, codes are upper case
_custom = {
    "Z": {
        "Z": self_conversion,
        "J": Linear(0.64197530864)
    },
    "J": {
        "J": self_conversion,
        "Z": Linear(1 / 0.64197530864)
    }
}

unit_conversion = {
    "area": _common() | _area,
    "custom": _common() | _custom
}

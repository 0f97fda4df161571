_common = {
    "f": "Fahrenheit",
    "c": "Celsius",
    "km": "Kilometers",
    "mi": "Miles",
    "m": "Meters"
}

maps = {
    "area": _common | {
        "skm": "Square Kilometers",
        "smi": "Square Miles",
        "sm": "Square Meters",
        "sy": "Square Yards",
        "sf": "Square Feet",
        "h": "Hectares",
        "a": "Acres"
    },
    "custom": _common | {
        "Z": "Z Units",
        "J": "J Units"
    }
}

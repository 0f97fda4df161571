import argparse
import logging

from fuzzywuzzy import process, utils

from .unit_conversion import unit_conversion
from .unit_lookup import maps

logger = logging.getLogger("unitconv")

DEFAULT_PRESET = "area"
NOT_FOUND = "Conversion Not Found"
LIST_HEADER = "Accepted Units"
SUGGESTION_CUTOFF = 50 # fuzzy score below which no unit is suggested


class UnitConv:
    def __init__(self, preset=DEFAULT_PRESET):
        if preset not in unit_conversion:
            raise KeyError(f"unknown preset '{preset}', choose one of {UnitConv.get_all_presets()}")
        self.preset = preset
        self.conversions = unit_conversion[preset]
        self.units = maps[preset]

    @staticmethod
    def get_all_presets():
        """returns the names of the bundled unit tables"""

        return sorted(unit_conversion.keys())

    def get_all_units(self):
        """returns every code known to the preset, including conversion targets without a display name"""

        codes = set(self.units)
        for source, targets in self.conversions.items():
            codes.add(source)
            codes.update(targets)
        return sorted(codes)

    def resolve(self, input_unit, output_unit):
        """returns the conversion registered for the exact pair, or None"""

        conversion = self.conversions.get(input_unit, {}).get(output_unit)
        logger.info(f"{self.preset}: {input_unit} -> {output_unit} resolved to {conversion!r}")
        return conversion

    def convert(self, value, input_unit, output_unit):
        conversion = self.resolve(input_unit, output_unit)
        if conversion is None:
            return None
        return conversion(value)

    def unit_name(self, unit):
        return self.units.get(unit, "") # unknown codes have an empty name

    def list_units(self):
        return sorted(f"{code} ({name})" for code, name in self.units.items())

    def format_conversion(self, value, input_unit, output_unit, converted):
        return "%.1f %s = %.1f %s" % (value, self.unit_name(input_unit), converted, self.unit_name(output_unit))

    def suggest_unit(self, unit):
        """closest registered code to an unknown one, e.g. 'kn' -> 'km'"""

        if not utils.full_process(unit): # nothing left to match once punctuation is stripped
            return None
        match = process.extractOne(unit, self.get_all_units(), score_cutoff=SUGGESTION_CUTOFF)
        if match is None:
            return None
        return match[0]

    def run(self, value, input_unit, output_unit):
        """returns the line reporting the conversion of value"""

        converted = self.convert(value, input_unit, output_unit)
        if converted is None:
            if logger.isEnabledFor(logging.WARNING):
                self._warn_not_found(input_unit, output_unit)
            return NOT_FOUND
        return self.format_conversion(value, input_unit, output_unit, converted)

    def _warn_not_found(self, input_unit, output_unit):
        known = self.get_all_units()
        for unit in (input_unit, output_unit):
            if unit in known:
                continue
            suggestion = self.suggest_unit(unit)
            if suggestion:
                logger.warning(f"Unknown unit '{unit}' in preset '{self.preset}', did you mean '{suggestion}'?")
            else:
                logger.warning(f"Unknown unit '{unit}' in preset '{self.preset}'")
        logger.warning(f"No conversion from '{input_unit}' to '{output_unit}' in preset '{self.preset}'")


def build_parser():
    parser = argparse.ArgumentParser(prog="unitconv", description="convert a value between units of measure")
    parser.add_argument('-n', type=float, default=1.0, help='number to convert')
    parser.add_argument('-i', default='f', help='input unit of measure')
    parser.add_argument('-o', default='c', help='output unit of measure')
    parser.add_argument('-u', action='store_true', help='show accepted units')
    parser.add_argument('-p', '--preset',
                        default=DEFAULT_PRESET,
                        choices=UnitConv.get_all_presets(),
                        help='table of units to convert with')
    parser.add_argument('--loglevel',
                        default='',
                        choices=logging._nameToLevel.keys(),
                        help='Provide logging level parameter in order to set what level of log messages you want to record.')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    was_disabled = logger.disabled
    if not args.loglevel: # default is to keep the output to the result only
        logger.disabled = True
    else:
        logger.disabled = False
        logging.basicConfig(format='%(levelname)s:%(message)s', level=args.loglevel)

    try:
        converter = UnitConv(args.preset)
        logger.info(f"Using preset '{converter.preset}'")

        if args.u:
            print(LIST_HEADER)
            for line in converter.list_units():
                print(line)
        else:
            print(converter.run(args.n, args.i, args.o))
    finally:
        logger.disabled = was_disabled
    return 0

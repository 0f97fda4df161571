from unitconv import UnitConv

if __name__ == '__main__':
    converter = UnitConv()

    print(converter.run(98.6, "f", "c"))
    print(converter.run(100, "km", "mi"))
    print(converter.run(1, "f", "skm"))

    for line in converter.list_units():
        print(line)

    converter2 = UnitConv("custom") # Z and J demo units instead of area units
    print(converter2.convert(10, "Z", "J"))
    print(converter2.resolve("Z", "km"))

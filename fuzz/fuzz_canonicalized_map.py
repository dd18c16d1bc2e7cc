import sys

import atheris
from helpers import EnhancedDataProvider

with atheris.instrument_imports():
    from python_mediatype.datastructures import CaseInsensitiveMap


def TestOneInput(data: bytes) -> None:
    fdp = EnhancedDataProvider(data)
    m = CaseInsensitiveMap()
    reference = {}

    for _ in range(fdp.ConsumeIntInRange(0, 32)):
        key = fdp.ConsumeShortString(4)
        value = fdp.ConsumeShortString(4)
        if fdp.ConsumeBool():
            m[key] = value
            reference[key.lower()] = (key, value)
        else:
            assert m.remove(key) == reference.pop(key.lower(), (None, None))[1]

    assert len(m) == len(reference)
    assert sorted(m.items()) == sorted(reference.values())


def main():
    atheris.Setup(sys.argv, TestOneInput)
    atheris.Fuzz()


if __name__ == "__main__":
    main()

import sys

import atheris
from helpers import EnhancedDataProvider

with atheris.instrument_imports():
    from python_mediatype.exceptions import MalformedMimeTypeError
    from python_mediatype.grammar import NON_TOKEN_RE
    from python_mediatype.mediatype import MediaType


def TestOneInput(data: bytes) -> None:
    fdp = EnhancedDataProvider(data)
    base = MediaType(fdp.ConsumeShortString(), fdp.ConsumeShortString(), fdp.ConsumeParameters())

    try:
        changed = base.change(mime_type=fdp.ConsumeShortString(), parameters=fdp.ConsumeParameters())
    except MalformedMimeTypeError:
        return

    serialized = str(changed)
    for name, value in changed.parameters.items():
        if NON_TOKEN_RE.search(value):
            assert f'{name}="' in serialized
    assert serialized.startswith(changed.mime_type)


def main():
    atheris.Setup(sys.argv, TestOneInput)
    atheris.Fuzz()


if __name__ == "__main__":
    main()

import atheris


class EnhancedDataProvider(atheris.FuzzedDataProvider):
    def ConsumeRandomString(self) -> str:
        return self.ConsumeUnicodeNoSurrogates(self.ConsumeIntInRange(0, self.remaining_bytes()))

    def ConsumeShortString(self, max_length: int = 16) -> str:
        return self.ConsumeUnicodeNoSurrogates(self.ConsumeIntInRange(0, max_length))

    def ConsumeParameters(self, max_count: int = 4) -> dict[str, str]:
        return {
            self.ConsumeShortString(): self.ConsumeShortString()
            for _ in range(self.ConsumeIntInRange(0, max_count))
        }

from textwriter.utilities.env.parsing import _env_int

DEFAULT_TEXT_SIZE = 11
DEFAULT_WRAP_AT = 480


class LayoutConfiguration:
    @classmethod
    def text_size(cls) -> int:
        return _env_int("TEXTWRITER_TEXT_SIZE", default=DEFAULT_TEXT_SIZE, minimum=1)

    @classmethod
    def wrap_at(cls) -> int:
        return _env_int("TEXTWRITER_WRAP_AT", default=DEFAULT_WRAP_AT, minimum=0)

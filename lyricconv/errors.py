from __future__ import annotations


class ConvertError(ValueError):
    pass


class UnsupportedFormat(ConvertError):
    pass


class ReadError(ConvertError):
    def __init__(self, line_no: int, line: str):
        super().__init__(f"Read error on line {line_no}: <{line}>")
        self.line_no = line_no
        self.line = line

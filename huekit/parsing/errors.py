class ParseError(ValueError):
    """Raised when text does not match a color notation."""

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"{reason}: {text!r}")

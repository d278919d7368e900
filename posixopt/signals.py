# posixopt POSIX Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals raised by `OptParser.parse`.

These signals interrupt normal parsing when the user asked for informational
output instead of running the program. They are not errors.

All signals inherit from `FlowSignal`, which is a subclass of `BaseException`
to ensure they bypass standard `except Exception` blocks.

Signals:
- HelpSignal: Help text was rendered.
- VersionSignal: Version text was rendered.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in posixopt."""

    exit_code: int = 0


class HelpSignal(FlowSignal):
    """Raised after help information was displayed."""

    def __init__(self, message: str = "Help signal received."):
        super().__init__(message)


class VersionSignal(FlowSignal):
    """Raised after version information was displayed."""

    def __init__(self, message: str = "Version signal received."):
        super().__init__(message)

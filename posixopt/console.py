# posixopt POSIX Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instances for posixopt output."""
from rich.console import Console

console = Console()
err_console = Console(stderr=True)

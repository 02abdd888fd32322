from .core import run_command

__all__ = ["run_command"]

from .process import spawn_process

__all__ = ["spawn_process"]

from .runner import BackgroundRunner, default_runner, shutdown_default_runner

__all__ = ["BackgroundRunner", "default_runner", "shutdown_default_runner"]

"""Version helpers for flowcut."""
from importlib.metadata import PackageNotFoundError, version

__version__ = "0.1.0"
try:
    __version__ = version("flowcut")
except PackageNotFoundError:  # pragma: no cover - fallback for editable/dev installs.
    pass

__all__ = ["__version__"]

"""View Renderer: view/layout HTML composition for FastAPI apps"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("view-renderer")
except PackageNotFoundError:
    __version__ = "dev"

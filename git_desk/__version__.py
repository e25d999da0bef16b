"""Version information for git-desk."""

try:
    from importlib.metadata import version, PackageNotFoundError

    __version__ = version("git-desk")
except PackageNotFoundError:
    # Fallback when running from a source checkout that was never installed
    __version__ = "0.0.0+unknown"

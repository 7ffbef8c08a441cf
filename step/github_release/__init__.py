"""GitHub Release step: publish a release, attach an asset, expose RELEASE_URL."""

__version__ = "1.0.0"

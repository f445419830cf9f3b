"""Keep the revisions in a pre-commit configuration file up to date."""

from pre_commit_bump.version import __version__

__all__ = ['__version__']

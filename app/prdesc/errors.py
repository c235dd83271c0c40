from __future__ import annotations


class PRDescriptionError(Exception):
    """Base class for failures that end a run."""


class ConfigurationError(PRDescriptionError):
    pass


class BranchResolutionError(PRDescriptionError):
    pass


class GenerationError(PRDescriptionError):
    pass


class RemoteResolutionError(PRDescriptionError):
    pass


class NoMatchingPullRequestError(PRDescriptionError):
    pass

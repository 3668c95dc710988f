"""Error types raised while scoring packages."""


class TrustScoreError(Exception):
    """Base class for errors raised by OSS Trust Score."""

    pass


class InvalidReferenceKind(TrustScoreError):
    """Raised when an input line is neither a GitHub nor an npm package URL."""

    def __init__(self, reference: str):
        self.reference = reference
        super().__init__(
            f"Invalid URL type: {reference!r} must be a GitHub or npm package URL"
        )


class RepositoryURLNotFound(TrustScoreError):
    """Raised when a registry manifest does not declare a repository URL."""

    def __init__(self, package_endpoint: str):
        self.package_endpoint = package_endpoint
        super().__init__(
            f"npm registry: repository URL not found for {package_endpoint!r}"
        )


class InvalidRepositoryURL(TrustScoreError):
    """Raised when a repository URL has no owner/repository path segments."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Cannot determine owner and repository from {url!r}")


class ArityMismatch(TrustScoreError):
    """Raised when composite score inputs do not have exactly five entries."""

    pass


class GitCommandError(TrustScoreError):
    """Raised when a git subprocess fails."""

    def __init__(self, command: list[str], returncode: int, stderr: str = ""):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        message = f"git command failed ({returncode}): {' '.join(command)}"
        if stderr:
            message = f"{message}: {stderr.strip()}"
        super().__init__(message)

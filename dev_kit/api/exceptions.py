"""Exception definitions for dev-kit"""

from ..constants import ErrorCode


class DevKitError(Exception):
    """Base exception for dev-kit"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code


class ConfigError(DevKitError):
    """Configuration error"""

    def __init__(self, message: str, error_code: str = ErrorCode.CONFIG_FORMAT_ERROR):
        super().__init__(message, error_code)


class ConfigParseError(ConfigError):
    """dk.config.json exists but is not valid JSON"""

    def __init__(self, path, reason: str):
        super().__init__(f"Failed to parse {path}: {reason}")
        self.path = path
        self.reason = reason


class ConfigNotFoundError(ConfigError):
    """Command requires a config that does not exist"""

    def __init__(self, message: str = None):
        if message is None:
            message = "No dk.config.json found. Run 'dk init' first."
        super().__init__(message, ErrorCode.CONFIG_NOT_FOUND)


class DeployError(DevKitError):
    """Deployment operation error"""

    def __init__(self, message: str, error_code: str = ErrorCode.DEPLOY_FAILED):
        super().__init__(message, error_code)


class CommandFailedError(DeployError):
    """External command exited with a non-zero status"""

    def __init__(self, description: str, argv=None, exit_code: int = None, stderr: str = ""):
        message = description
        detail = (stderr or "").strip()
        if detail:
            message = f"{description}: {detail}"
        elif exit_code is not None:
            message = f"{description} (exit code {exit_code})"
        super().__init__(message, ErrorCode.COMMAND_FAILED)
        self.argv = list(argv or [])
        self.exit_code = exit_code
        self.stderr = stderr


class UncommittedChangesError(DeployError):
    """Working tree is dirty"""

    def __init__(self):
        super().__init__(
            "There are uncommitted changes. Please commit or stash your changes "
            "before deploying.",
            ErrorCode.UNCOMMITTED_CHANGES
        )


class WrongBranchError(DeployError):
    """Deploy attempted from a branch other than the required one"""

    def __init__(self, current_branch: str, required_branch: str = "main"):
        super().__init__(
            f"You must be on the {required_branch} branch to deploy "
            f"(current branch: {current_branch or 'detached HEAD'}).",
            ErrorCode.WRONG_BRANCH
        )
        self.current_branch = current_branch
        self.required_branch = required_branch


class ManifestNotFoundError(DeployError):
    """package.json is missing or unreadable"""

    def __init__(self, message: str = "package.json not found."):
        super().__init__(message, ErrorCode.MANIFEST_NOT_FOUND)


class MissingVersionError(DeployError):
    """package.json has no version field"""

    def __init__(self, message: str = "No version found in package.json."):
        super().__init__(message, ErrorCode.MISSING_VERSION)


class InvalidVersionFormatError(DeployError):
    """Version is not a plain major.minor.patch triple"""

    def __init__(self, version):
        super().__init__(
            f"Invalid version format '{version}'. "
            f"Expected semantic versioning (x.y.z) with numeric parts.",
            ErrorCode.VERSION_FORMAT_ERROR
        )
        self.version = version

"""Global constants for dev-kit"""

from enum import Enum

APP_NAME = "dk"
LOG_FORMAT = "%(message)s"

# Config schema version
CONFIG_LATEST_VERSION = 1

# Project files
CONFIG_FILE = "dk.config.json"
DEPLOY_STATE_FILE = "deploy.json"
PACKAGE_MANIFEST_FILE = "package.json"
ENV_FILE = ".env"
JSON_INDENT = 2


class ProjectType(str, Enum):
    """Project archetypes understood by dk"""
    NODE_EXPRESS = "node-express"
    VITE_REACT = "vite-react"
    REACT_NATIVE_CLI = "react-native-cli"
    SPRING_BOOT_MICROSERVICE = "spring-boot-microservice"
    NEXTJS = "nextjs"


PROJECT_TYPE_LABELS = {
    ProjectType.NODE_EXPRESS: "Node.js (Express)",
    ProjectType.VITE_REACT: "Vite + React",
    ProjectType.REACT_NATIVE_CLI: "React Native CLI",
    ProjectType.SPRING_BOOT_MICROSERVICE: "Spring Boot Microservices",
    ProjectType.NEXTJS: "Next.js",
}

FRONTEND_PROJECT_TYPES = (
    ProjectType.VITE_REACT,
    ProjectType.REACT_NATIVE_CLI,
    ProjectType.NEXTJS,
)


class DatabaseType(str, Enum):
    MYSQL = "mysql"
    POSTGRES = "postgres"
    SQLITE = "sqlite"
    MONGODB = "mongodb"


class ImageNameCase(str, Enum):
    KEBAB_CASE = "kebab-case"
    SNAKE_CASE = "snake_case"
    ANY = "any"


class InfoComment(str, Enum):
    HIDDEN = "hidden"
    SHORT_INFO = "short_info"


# URL scheme -> database type
DATABASE_URL_SCHEMES = {
    "mysql": DatabaseType.MYSQL,
    "postgres": DatabaseType.POSTGRES,
    "postgresql": DatabaseType.POSTGRES,
    "sqlite": DatabaseType.SQLITE,
    "mongodb": DatabaseType.MONGODB,
    "mongo": DatabaseType.MONGODB,
}
DATABASE_URL_KEY = "DATABASE_URL"
DATABASE_DIR = "database"
DATABASE_DUMPS_DIR = "database/dumps"
DATABASE_MIGRATIONS_DIR = "database/migrations"

# Spring Boot structural probe
BUILD_TOOL_MARKERS = [
    "pom.xml",
    "build.gradle",
    "build.gradle.kts",
    "mvnw",
    "mvnw.cmd",
]
MICROSERVICE_NAME_PATTERNS = [
    "service",
    "gateway",
    "registry",
    "discovery",
    "config",
    "auth",
    "user",
    "payment",
    "transaction",
]
MIN_SPRING_BOOT_SERVICES = 2

# Default images directory suggested by init
DEFAULT_IMAGES_DIRS = {
    ProjectType.VITE_REACT: "src/assets/images",
    ProjectType.REACT_NATIVE_CLI: "src/assets/images",
    ProjectType.NEXTJS: "public/images",
}

# Git / deployment
GIT_REMOTE = "origin"
MAIN_BRANCH = "main"
DEV_BRANCH = "dev"
STABLE_BRANCH = "stable"
DEPLOY_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
DEPLOY_COMMIT_TEMPLATE = "{timestamp}-V{version} Production Deployment"
DEPLOY_PR_TITLE_TEMPLATE = "V{version} Deploy PR"
BUMP_COMMIT_TEMPLATE = "Increment version to {version}"

# Environment variables
ENV_LOG_LEVEL = "DK_LOG_LEVEL"
ENV_NPM_COMMAND = "DK_NPM_COMMAND"
ENV_GH_COMMAND = "DK_GH_COMMAND"
DEFAULT_NPM_COMMAND = "npm"
DEFAULT_GH_COMMAND = "gh"

# Clean targets: (pattern, is_directory)
CLEAN_NODE_DEFAULTS = [
    ("dist", True),
    ("build", True),
    (".next", True),
    (".turbo", True),
    ("coverage", True),
    ("out", True),
    ("node_modules/.cache", True),
    (".parcel-cache", True),
    (".vite", True),
    ("**/*.log", False),
    (".tmp", True),
]
CLEAN_RN_ANDROID_DEFAULTS = [
    ("android/app/build", True),
    ("android/build", True),
    ("android/.gradle", True),
]
CLEAN_RN_IOS_DEFAULTS = [
    ("ios/build", True),
    ("ios/Pods", True),
    ("ios/DerivedData", True),
]
# Never descend into these while expanding file globs
CLEAN_SKIP_DIRS = {"node_modules", ".git"}


class CleanMode(str, Enum):
    ALL = "all"
    NODE = "node"
    RN_ANDROID = "rn-android"
    RN_IOS = "rn-ios"


# Error codes
class ErrorCode:
    CONFIG_FORMAT_ERROR = "DK001"
    CONFIG_NOT_FOUND = "DK002"
    COMMAND_FAILED = "DK003"
    UNCOMMITTED_CHANGES = "DK004"
    WRONG_BRANCH = "DK005"
    MANIFEST_NOT_FOUND = "DK006"
    MISSING_VERSION = "DK007"
    VERSION_FORMAT_ERROR = "DK008"
    DEPLOY_FAILED = "DK009"


# Display constants
EMOJI_SUCCESS = "✓"
EMOJI_ERROR = "✗"
EMOJI_WARNING = "⚠"
EMOJI_INFO = "ℹ"
EMOJI_ROCKET = "🚀"
EMOJI_BROOM = "🧹"
EMOJI_FOLDER = "📁"
EMOJI_FILE = "📄"
EMOJI_GLOBE = "🌐"
EMOJI_WRENCH = "🔧"
EMOJI_PARTY = "🎉"

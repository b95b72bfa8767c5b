"""Constants used in the project."""


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    MANIFEST_FILE = "qilletni_info.yml"
    LOCK_FILE = "qilletni.lock"
    SRC_DIR = "qilletni-src"
    LOCKFILE_VERSION = 1
    SNAPSHOT_SUFFIX = "-SNAPSHOT"
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    DEFAULT_LOG_LEVEL = "INFO"
    ENV_LOG_LEVEL = "QILLETNI_LOG_LEVEL"

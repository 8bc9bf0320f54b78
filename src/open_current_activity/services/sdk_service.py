"""Android SDK location and adb path resolution."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from open_current_activity.config.paths import (
    ADB_SUBDIR,
    LOCAL_PROPERTIES_FILE,
    LOCAL_PROPERTIES_SDK_KEY,
    SDK_ENV_VARS,
)
from open_current_activity.config.settings import ProjectSettings
from open_current_activity.utils.file_utils import dir_exists, read_properties
from open_current_activity.utils.platform import get_adb_binary_name

logger = logging.getLogger(__name__)


def get_adb_path(sdk_root: str | Path) -> Path:
    """Get the path of adb inside an Android SDK.

    Args:
        sdk_root: Android SDK root directory

    Returns:
        ``<sdk_root>/platform-tools/adb`` (``adb.exe`` on Windows)
    """
    adb_path = Path(sdk_root) / ADB_SUBDIR / get_adb_binary_name()
    logger.info(f"adbPath='{adb_path}'")
    return adb_path


class EnvironmentSdkProvider:
    """SdkPathProvider for the command line.

    Candidates are tried in order and the first existing directory wins:

    1. ``sdk_root`` passed explicitly (the ``--sdk`` option)
    2. ``OCA_SDK_ROOT`` (ProjectSettings.sdk_root)
    3. ``ANDROID_HOME``, then ``ANDROID_SDK_ROOT``
    4. ``sdk.dir`` in the project's local.properties
    """

    def __init__(
        self,
        project_root: Path | None = None,
        sdk_root: str | None = None,
        settings: ProjectSettings | None = None,
        environment: Mapping[str, str] | None = None,
    ):
        """Initialize SDK provider.

        Args:
            project_root: Android project root (defaults to current directory)
            sdk_root: Explicit SDK root, checked first
            settings: Project settings (defaults read from the environment)
            environment: Environment variables (defaults to os.environ)
        """
        self.project_root = project_root or Path.cwd()
        self.sdk_root = sdk_root
        self.settings = settings or ProjectSettings()
        self.environment = os.environ if environment is None else environment

    def candidates(self) -> list[tuple[str, str]]:
        """List SDK root candidates with where they came from.

        Returns:
            (source, path) pairs in lookup order, unset sources omitted
        """
        found: list[tuple[str, str]] = []
        if self.sdk_root:
            found.append(("--sdk", self.sdk_root))
        if self.settings.sdk_root:
            found.append(("OCA_SDK_ROOT", self.settings.sdk_root))
        for var in SDK_ENV_VARS:
            value = self.environment.get(var)
            if value:
                found.append((var, value))
        properties = read_properties(self.project_root / LOCAL_PROPERTIES_FILE)
        sdk_dir = properties.get(LOCAL_PROPERTIES_SDK_KEY)
        if sdk_dir:
            found.append((LOCAL_PROPERTIES_FILE, sdk_dir))
        return found

    def get_sdk_root(self) -> str | None:
        """Return the first configured SDK root that exists on disk."""
        for source, path in self.candidates():
            if dir_exists(Path(path).expanduser()):
                logger.info(f"Android SDK from {source}: {path}")
                return str(Path(path).expanduser())
            logger.warning(f"Ignoring Android SDK from {source}, not a directory: {path}")
        logger.warning("Could not find Android sdk path")
        return None

"""Path constants for open-current-activity.

Where adb lives inside an Android SDK and where an Android project records
its SDK location.
"""

# =============================================================================
# Android SDK Layout
# =============================================================================

ADB_SUBDIR = "platform-tools"
ADB_BINARY_WINDOWS = "adb.exe"
ADB_BINARY_POSIX = "adb"

# =============================================================================
# Android Project Files
# =============================================================================

LOCAL_PROPERTIES_FILE = "local.properties"
LOCAL_PROPERTIES_SDK_KEY = "sdk.dir"

# =============================================================================
# Environment
# =============================================================================

DOTENV_FILE = ".env"

# Standard SDK variables, checked in this order
SDK_ENV_VARS: tuple[str, ...] = ("ANDROID_HOME", "ANDROID_SDK_ROOT")

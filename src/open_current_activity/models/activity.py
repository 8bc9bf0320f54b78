"""Models for activities, adb line signals and resolution outcomes."""

from dataclasses import dataclass

from open_current_activity.models.enums import ErrorKind, SignalKind

DeviceId = str


@dataclass(frozen=True)
class ActivityIdentifier:
    """The foreground activity reported by `dumpsys activity activities`.

    Attributes:
        package_name: Application package, e.g. ``com.example.app``.
        class_name: Activity class as printed by adb. Either fully qualified
            (``com.example.app.MainActivity``) or relative to the package
            (``.MainActivity``).
    """

    package_name: str
    class_name: str

    def __post_init__(self) -> None:
        if not self.class_name or not self.class_name.strip("."):
            raise ValueError(f"Activity class name must not be empty: {self.class_name!r}")

    @property
    def short_name(self) -> str:
        """Simple class name, used to look up the source file.

        Nested classes (``Outer$Inner``) resolve to the outer class since
        that is the name of the file declaring them.
        """
        name = self.class_name.rsplit(".", 1)[-1]
        return name.split("$", 1)[0]

    @property
    def qualified_name(self) -> str:
        """Fully qualified class name."""
        if self.class_name.startswith("."):
            return f"{self.package_name}{self.class_name}"
        return self.class_name

    def __str__(self) -> str:
        return f"{self.package_name}/{self.class_name}"


@dataclass(frozen=True)
class ClassificationSignal:
    """Meaning of a single adb output line.

    Only FOCUSED_ACTIVITY carries an activity and only DEVICE_LIST_ENTRY
    carries a device id.
    """

    kind: SignalKind
    activity: ActivityIdentifier | None = None
    device_id: DeviceId | None = None
    line: str = ""

    @property
    def is_terminal(self) -> bool:
        return self.kind.is_terminal


@dataclass(frozen=True)
class ResolutionOutcome:
    """Final result of resolving the current activity for one device scope.

    Attributes:
        device_id: Device the resolution was scoped to (None when unscoped).
        activity: Resolved activity on success.
        error: Failure category on failure.
        message: User-facing message that was reported for a failure.
    """

    device_id: DeviceId | None = None
    activity: ActivityIdentifier | None = None
    error: ErrorKind | None = None
    message: str | None = None

    def __post_init__(self) -> None:
        if (self.activity is None) == (self.error is None):
            raise ValueError("ResolutionOutcome needs exactly one of activity or error")

    @property
    def succeeded(self) -> bool:
        return self.activity is not None

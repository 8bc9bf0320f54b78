"""Tests for the adb output line classifier."""

import pytest

from open_current_activity.adb.classifier import classify
from open_current_activity.models.activity import ActivityIdentifier
from open_current_activity.models.enums import SignalKind

RESUMED_LINE = (
    "    mResumedActivity: ActivityRecord{8d3c0b1 u0 com.example.app/.MainActivity t42}"
)
FOCUSED_LINE = (
    "  mFocusedActivity: ActivityRecord{42a7b8c u0 "
    "com.example.app/com.example.app.MainActivity t7}"
)


class TestTerminalMarkers:
    """Lines adb prints instead of the requested output."""

    def test_more_than_one_device(self):
        signal = classify("error: more than one device/emulator")

        assert signal.kind is SignalKind.MULTIPLE_DEVICES
        assert signal.activity is None
        assert signal.device_id is None

    def test_device_not_found(self):
        assert classify("error: device not found").kind is SignalKind.DEVICE_NOT_FOUND

    @pytest.mark.parametrize(
        "line", ["error: no devices/emulators found", "adb: no devices/emulators found"]
    )
    def test_no_devices_attached(self, line):
        assert classify(line).kind is SignalKind.DEVICE_NOT_FOUND

    def test_quoted_device_not_found(self):
        signal = classify("error: device 'emulator-5556' not found")

        assert signal.kind is SignalKind.DEVICE_NOT_FOUND

    def test_multiple_devices_wins_over_everything(self):
        line = "more than one device device not found mResumedActivity a.b/.C List of devices"

        assert classify(line).kind is SignalKind.MULTIPLE_DEVICES

    def test_device_not_found_wins_over_activity(self):
        line = "device not found mFocusedActivity com.example/com.example.Main"

        assert classify(line).kind is SignalKind.DEVICE_NOT_FOUND


class TestFocusedActivity:
    """Lines naming the activity in the foreground."""

    def test_fully_qualified_class(self):
        signal = classify(FOCUSED_LINE)

        assert signal.kind is SignalKind.FOCUSED_ACTIVITY
        assert signal.activity == ActivityIdentifier(
            "com.example.app", "com.example.app.MainActivity"
        )

    def test_package_relative_class(self):
        signal = classify(RESUMED_LINE)

        assert signal.kind is SignalKind.FOCUSED_ACTIVITY
        assert signal.activity is not None
        assert signal.activity.package_name == "com.example.app"
        assert signal.activity.class_name == ".MainActivity"
        assert signal.activity.short_name == "MainActivity"

    def test_marker_anywhere_in_line(self):
        line = "foo mFocusedActivity bar com.example.app/com.example.app.MainActivity baz"

        signal = classify(line)

        assert signal.kind is SignalKind.FOCUSED_ACTIVITY
        assert str(signal.activity) == "com.example.app/com.example.app.MainActivity"

    def test_nested_class_name(self):
        line = "  topResumedActivity=ActivityRecord{1 u0 com.example/com.example.Outer$Inner t3}"

        signal = classify(line)

        assert signal.kind is SignalKind.FOCUSED_ACTIVITY
        assert signal.activity is not None
        assert signal.activity.short_name == "Outer"

    def test_carries_no_device_id(self):
        assert classify(RESUMED_LINE).device_id is None

    @pytest.mark.parametrize(
        "line",
        [
            "  mResumedActivity: null",
            "mFocusedActivity:ActivityRecord{abc}",
            "x mResumedActivity com.example/.",
        ],
    )
    def test_malformed(self, line):
        signal = classify(line)

        assert signal.kind is SignalKind.MALFORMED_ACTIVITY
        assert signal.activity is None

    def test_without_marker_is_not_an_activity(self):
        signal = classify("    Intent { cmp=com.example.app/.MainActivity }")

        assert signal.kind is SignalKind.NO_SIGNAL


class TestDeviceList:
    """Lines of `adb devices` output."""

    def test_header(self):
        assert classify("List of devices attached").kind is SignalKind.DEVICE_LIST_HEADER

    @pytest.mark.parametrize(
        ("line", "device_id"),
        [
            ("emulator-5554\tdevice", "emulator-5554"),
            ("0123456789ABCDEF   device", "0123456789ABCDEF"),
            ("192.168.1.5:5555\tdevice", "192.168.1.5:5555"),
            ("emulator-5556\toffline\r\n", "emulator-5556"),
        ],
    )
    def test_entry(self, line, device_id):
        signal = classify(line)

        assert signal.kind is SignalKind.DEVICE_LIST_ENTRY
        assert signal.device_id == device_id
        assert signal.activity is None

    @pytest.mark.parametrize(
        "line",
        [
            "",
            "   ",
            "emulator-5554",
            "* daemon not running; starting now at tcp:5037",
            "* daemon started successfully",
        ],
    )
    def test_no_signal(self, line):
        assert classify(line).kind is SignalKind.NO_SIGNAL


@pytest.mark.parametrize(
    "line",
    [
        RESUMED_LINE,
        FOCUSED_LINE,
        "error: more than one device/emulator",
        "List of devices attached",
        "emulator-5554\tdevice",
        "  mResumedActivity: null",
        "ACTIVITY MANAGER ACTIVITIES (dumpsys activity activities)",
    ],
)
def test_classify_is_deterministic(line):
    assert classify(line) == classify(line)


def test_line_terminator_is_ignored():
    assert classify(RESUMED_LINE + "\r\n") == classify(RESUMED_LINE)


def test_terminal_kinds():
    assert classify("error: more than one device/emulator").is_terminal
    assert classify("error: device not found").is_terminal
    assert classify(RESUMED_LINE).is_terminal
    assert classify("  mResumedActivity: null").is_terminal
    assert not classify("List of devices attached").is_terminal
    assert not classify("emulator-5554\tdevice").is_terminal
    assert not classify("").is_terminal

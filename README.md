# evtr

This package provides the state, discovery and geometry logic for an
interactive inspector of Linux evdev input devices. All of it is plain Python
with no third-party dependencies.

## Modules

- **`evtr.discovery`** scans a directory for input device nodes.
  `discover_devices(open_device, input_dir="/dev/input")` lists the directory.
  It calls `open_device` on every entry whose name starts with `event`. Each
  device the callable returns is collected in a `DiscoveryResult`.
  - An `OSError` raised by the callable is counted as an open failure.
    `PermissionError` is counted separately from other errors.
  - A directory that cannot be listed is recorded as a read failure.
  - `DiscoveryResult.issue()` returns a `DiscoveryIssue` when no device was
    found. Its kind is one of `IssueKind.READ_DIR`, `PERMISSION_DENIED`,
    `OPEN_FAILED` or `NO_DEVICES_FOUND`.
  - `error_message()` gives the text for that issue.
  - `discover_from_entries(entries, open_device)` does the same over an
    iterable of `Path` or `OSError` entries.
- **`evtr.devices`** holds the list of found devices.
  - `DeviceInfo` pairs an opened device with its name and path.
  - `DeviceCatalog.from_discovery(result, SortOrder.PATH | SortOrder.NAME)`
    sorts the devices and builds labels of the form `Name (/dev/input/eventN)`.
    It returns the catalog together with the discovery error message.
  - `take_selected(index)` removes a device from the catalog and returns it.
- **`evtr.filter`** provides search over the device labels.
  - `fuzzy_score` scores a pattern as a subsequence of a text. Matching ignores
    case unless the pattern contains an upper-case letter.
  - `filtered_indexes_by_query` returns the indexes of matching items, best
    match first.
  - `FilterState` keeps the query, the matching indexes and a selection cursor.
    The cursor moves by line, by page, or to the first or last match.
- **`evtr.selector_state`** holds the state of the device selector.
  - `SelectorState.reduce(command, labels)` applies a `SelectorCommand`, such as
    `SelectorCommand.add_char("g")` or `SelectorCommand(CommandKind.SELECT)`.
    It returns a `SelectorTransition`: `STAY`, `EXIT`, `REFRESH_DEVICES` or
    `OPEN_SELECTION`.
  - `empty_state_message` gives the text to show when the list is empty.
- **`evtr.monitor_state`** holds the state of the device monitor.
  - `MonitorState` tracks which panel has focus (`Focus`) and which popup is
    open (`ActivePopup`). It also tracks the scroll offsets of the axis and
    button panels, within `ScrollLimits`, and the joystick y-inversion flag.
  - `StartupFocus` and `Counts` decide the initial focus.
- **`evtr.touch_types`** detects touch support.
  - `inspect_touch_device(TouchCapabilities(...))` works out the `TouchMode`
    (none, single touch or multi touch), the slot limit and the axis ranges. It
    also returns any startup warnings.
  - `TouchRange` holds either fixed bounds or bounds observed from events.
- **`evtr.touch_events`** and **`evtr.touch`** track touches.
  - `TouchState.update(InputEvent(...))` applies single-touch or multi-touch
    protocol events.
  - `active_points()` returns the contacts that are currently down.
  - `inactive_points()` returns the last positions of contacts that were
    released.
  - `TouchState.from_capabilities` builds the state from detection results.
- **`evtr.geometry`**, **`evtr.hat`**, **`evtr.touch_render`** and
  **`evtr.view_model`** are layout helpers.
  - `Rect` fitting, centring and insetting.
  - Value normalisation onto `[0, 1]` or `[-1, 1]`.
  - D-pad point sets (`base_points`, `active_points`).
  - Touch coordinate mapping (`normalize_points`).
  - `JoystickState` and `HatState` derived from `AbsoluteAxis` values.
- **`evtr.startup`** formats device details.
  `device_info_lines(driver_version, InputId(...), phys, warnings)` returns
  lines for the driver version, the bus, vendor, product and version IDs, the
  physical path, and each startup warning.

## Examples

Discovering devices:

```python
from evtr.discovery import discover_devices
from evtr.devices import DeviceCatalog, DeviceInfo, SortOrder

def open_device(path):
    with open(path, "rb"):
        pass
    return DeviceInfo(device=None, name=path.name, path=path)

catalog, error = DeviceCatalog.from_discovery(
    discover_devices(open_device, "/dev/input"), SortOrder.PATH
)
print(error or catalog.labels)
```

Selecting from a filtered list:

```python
from evtr.selector_state import CommandKind, SelectorCommand, SelectorState

labels = ["usb mouse", "gamepad"]
state = SelectorState(labels, None, 10)
state.reduce(SelectorCommand.add_char("g"), labels)
print(state.filtered_indexes())                                   # [1]
print(state.reduce(SelectorCommand(CommandKind.SELECT), labels))  # SelectorTransition.OPEN_SELECTION
```

Tracking multi-touch contacts:

```python
from evtr.touch import TouchState
from evtr.touch_events import EventType, InputEvent
from evtr.touch_types import AbsAxis, MultiTouchSlots, TouchMode, TouchRange

touch = TouchState.from_parts(
    TouchMode.multi_touch(MultiTouchSlots.EXPLICIT), 2,
    TouchRange.fixed(0, 100), TouchRange.fixed(0, 100),
)
for code, value in [
    (AbsAxis.ABS_MT_SLOT, 1),
    (AbsAxis.ABS_MT_TRACKING_ID, 42),
    (AbsAxis.ABS_MT_POSITION_X, 40),
    (AbsAxis.ABS_MT_POSITION_Y, 60),
]:
    touch.update(InputEvent(EventType.ABSOLUTE, code, value))
print(touch.active_points())  # [(40, 60)]
```

## What it does not do

This package contains no command and draws nothing in the terminal. It has
no key bindings and no configuration file. It does not open or read input
devices by itself: you supply the callable that opens a device node, the
`TouchCapabilities` that describe a device, and the `InputEvent`s.

## Installation

```
pip install .
```

## Tests

```
pip install .[test]
pytest
```
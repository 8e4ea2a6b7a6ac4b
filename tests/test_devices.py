from pathlib import Path

from evtr.devices import (
    DeviceCatalog,
    DeviceInfo,
    SortOrder,
    catalog_parts_from_discovery,
    device_label,
    format_device_label,
    sort_entries,
    take_selected_item,
)
from evtr.discovery import DiscoveryResult


def _discovery(*devices):
    result = DiscoveryResult()
    for device in devices:
        result.record_event_node()
        result.push_device(device)
    return result


def test_format_device_label_uses_structured_name_and_path():
    assert (
        format_device_label("Gamepad", Path("/dev/input/event7"))
        == "Gamepad (/dev/input/event7)"
    )


def test_device_label_uses_device_name_and_path():
    info = DeviceInfo(device=None, name="Pad", path=Path("/dev/input/event2"))
    assert device_label(info) == "Pad (/dev/input/event2)"


def test_catalog_parts_from_discovery_suppresses_partial_errors_when_devices_exist():
    discovery = DiscoveryResult()
    discovery.record_read_dir_error("/dev/input", PermissionError("read denied"))
    discovery.push_device(("Pad A", "/dev/input/event3"))
    discovery.push_device(("Pad B", "/dev/input/event4"))

    devices, labels, error_message = catalog_parts_from_discovery(
        discovery, lambda pair: format_device_label(pair[0], Path(pair[1]))
    )

    assert devices == [("Pad A", "/dev/input/event3"), ("Pad B", "/dev/input/event4")]
    assert labels == ["Pad A (/dev/input/event3)", "Pad B (/dev/input/event4)"]
    assert error_message is None


def test_catalog_parts_from_discovery_passes_through_error_when_empty():
    discovery = DiscoveryResult.read_dir_failed("/dev/input", PermissionError("read denied"))

    devices, labels, error_message = catalog_parts_from_discovery(discovery, str)

    assert devices == []
    assert labels == []
    assert error_message == "unable to read /dev/input: read denied"


def test_label_returns_value_for_valid_index():
    catalog = DeviceCatalog(devices=[], labels=["Pad A (/dev/input/event3)"])
    assert catalog.label(0) == "Pad A (/dev/input/event3)"


def test_label_returns_none_for_out_of_bounds_index():
    catalog = DeviceCatalog(devices=[], labels=["Pad A (/dev/input/event3)"])
    assert catalog.label(1) is None


def test_take_selected_item_returns_none_for_none_index():
    items = [10, 20]
    labels = ["Pad A", "Pad B"]

    assert take_selected_item(items, labels, None) is None
    assert items == [10, 20]
    assert labels == ["Pad A", "Pad B"]


def test_take_selected_item_returns_none_for_stale_index():
    items = [10]
    labels = ["Pad A"]

    assert take_selected_item(items, labels, 1) is None
    assert items == [10]
    assert labels == ["Pad A"]


def test_take_selected_item_removes_matching_item_and_label():
    items = [10, 20, 30]
    labels = ["Pad A", "Pad B", "Pad C"]

    assert take_selected_item(items, labels, 1) == 20
    assert len(items) == 2
    assert len(labels) == 2
    assert 20 not in items
    assert "Pad B" not in labels
    assert len(items) == len(labels)


def test_take_selected_item_keeps_items_and_labels_paired():
    items = [10, 20, 30]
    labels = ["Pad A", "Pad B", "Pad C"]

    take_selected_item(items, labels, 0)

    assert sorted(zip(items, labels)) == [(20, "Pad B"), (30, "Pad C")]


def test_sort_entries_reorders_without_index_invalidation():
    entries = [
        (("Pad C", 9), "Pad C (/dev/input/event9)"),
        (("Pad A", 3), "Pad A (/dev/input/event3)"),
        (("Pad B", 7), "Pad B (/dev/input/event7)"),
    ]

    devices, labels = sort_entries(entries, lambda item: item[1])

    assert devices == [("Pad A", 3), ("Pad B", 7), ("Pad C", 9)]
    assert labels == [
        "Pad A (/dev/input/event3)",
        "Pad B (/dev/input/event7)",
        "Pad C (/dev/input/event9)",
    ]


def test_from_discovery_sorts_by_path():
    discovery = _discovery(
        DeviceInfo(None, "Zeta", Path("/dev/input/event1")),
        DeviceInfo(None, "Alpha", Path("/dev/input/event9")),
        DeviceInfo(None, "Mid", Path("/dev/input/event0")),
    )

    catalog, error_message = DeviceCatalog.from_discovery(discovery, SortOrder.PATH)

    assert error_message is None
    assert catalog.labels == [
        "Mid (/dev/input/event0)",
        "Zeta (/dev/input/event1)",
        "Alpha (/dev/input/event9)",
    ]
    assert [device.name for device in catalog.devices] == ["Mid", "Zeta", "Alpha"]


def test_from_discovery_sorts_by_name_then_path():
    discovery = _discovery(
        DeviceInfo(None, "Pad", Path("/dev/input/event5")),
        DeviceInfo(None, "Mouse", Path("/dev/input/event1")),
        DeviceInfo(None, "Pad", Path("/dev/input/event2")),
    )

    catalog, _ = DeviceCatalog.from_discovery(discovery, SortOrder.NAME)

    assert catalog.labels == [
        "Mouse (/dev/input/event1)",
        "Pad (/dev/input/event2)",
        "Pad (/dev/input/event5)",
    ]


def test_from_discovery_returns_error_for_empty_discovery():
    catalog, error_message = DeviceCatalog.from_discovery(DiscoveryResult(), SortOrder.PATH)

    assert catalog.labels == []
    assert error_message == "no input devices found"


def test_take_selected_removes_device_from_catalog():
    pad = DeviceInfo("handle-a", "Pad", Path("/dev/input/event3"))
    mouse = DeviceInfo("handle-b", "Mouse", Path("/dev/input/event4"))
    catalog, _ = DeviceCatalog.from_discovery(_discovery(pad, mouse), SortOrder.PATH)

    taken = catalog.take_selected(0)

    assert taken is pad
    assert catalog.labels == ["Mouse (/dev/input/event4)"]
    assert catalog.take_selected(5) is None
    assert catalog.take_selected(None) is None
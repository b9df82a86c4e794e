"""
Tests for the checklist data model.

Usage:
    pytest setup_checklist/checklist/tests/test_models.py -v
"""
import sys
import pytest
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent.parent))

from setup_checklist.checklist.models import (
    ChecklistData,
    ChecklistFormatError,
    ChecklistItem,
    DismissalState,
)


def _item(item_id: str, completed: bool = False) -> ChecklistItem:
    return ChecklistItem(id=item_id, title=f"Step {item_id}", href=f"/dashboard/{item_id}", completed=completed)


class TestChecklistItem:

    def test_default_not_completed(self):
        item = ChecklistItem(id="pixel", title="Install pixel", href="/dashboard/pixel")
        assert item.completed is False

    def test_from_dict(self):
        item = ChecklistItem.from_dict(
            {"id": "pixel", "title": "Install pixel", "href": "/dashboard/pixel", "completed": True}
        )
        assert item == ChecklistItem(id="pixel", title="Install pixel", href="/dashboard/pixel", completed=True)

    def test_from_dict_accepts_link_field(self):
        item = ChecklistItem.from_dict({"id": 7, "title": "Leads", "link": "/dashboard/my-leads"})
        assert item.id == "7"
        assert item.href == "/dashboard/my-leads"

    def test_from_dict_string_completed(self):
        assert ChecklistItem.from_dict({"id": "a", "title": "A", "completed": "false"}).completed is False
        assert ChecklistItem.from_dict({"id": "a", "title": "A", "completed": "true"}).completed is True

    def test_from_dict_missing_id(self):
        with pytest.raises(ChecklistFormatError, match="missing 'id'"):
            ChecklistItem.from_dict({"title": "No id"})

    def test_from_dict_missing_title(self):
        with pytest.raises(ChecklistFormatError, match="missing 'title'"):
            ChecklistItem.from_dict({"id": "x"})

    def test_from_dict_not_an_object(self):
        with pytest.raises(ChecklistFormatError):
            ChecklistItem.from_dict(["id", "title"])

    def test_items_are_immutable(self):
        item = _item("a")
        with pytest.raises(AttributeError):
            item.completed = True


class TestChecklistData:

    def test_counts(self):
        data = ChecklistData.from_items([_item("a", True), _item("b"), _item("c")])
        assert data.total_count == 3
        assert data.completed_count == 1
        assert data.all_complete is False

    def test_all_complete(self):
        data = ChecklistData.from_items([_item("a", True), _item("b", True)])
        assert data.all_complete is True

    def test_empty_is_not_complete(self):
        assert ChecklistData().all_complete is False

    def test_order_preserved(self):
        data = ChecklistData.from_items([_item("c"), _item("a", True), _item("b")])
        assert [item.id for item in data.items] == ["c", "a", "b"]

    def test_items_stored_as_tuple(self):
        data = ChecklistData.from_items([_item("a")])
        assert isinstance(data.items, tuple)

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ChecklistFormatError, match="Duplicate"):
            ChecklistData.from_items([_item("a"), _item("a", True)])

    def test_direct_construction_coerces_to_tuple(self):
        data = ChecklistData(items=[_item("a"), _item("b", True)])
        assert isinstance(data.items, tuple)
        assert data.completed_count == 1

    def test_direct_construction_rejects_duplicates(self):
        with pytest.raises(ChecklistFormatError, match="Duplicate"):
            ChecklistData(items=[_item("a"), _item("a")])

    def test_from_payload_object(self):
        data = ChecklistData.from_payload({"items": [{"id": "a", "title": "A", "href": "/a"}]})
        assert data.items == (ChecklistItem(id="a", title="A", href="/a"),)

    def test_from_payload_bare_list(self):
        data = ChecklistData.from_payload([{"id": "a", "title": "A", "href": "/a", "completed": True}])
        assert data.completed_count == 1

    @pytest.mark.parametrize("payload", [None, {}, {"items": "nope"}, "items"])
    def test_from_payload_rejects_non_lists(self, payload):
        with pytest.raises(ChecklistFormatError):
            ChecklistData.from_payload(payload)


class TestDismissalState:

    def test_from_flag(self):
        assert DismissalState.from_flag(True) is DismissalState.DISMISSED
        assert DismissalState.from_flag(False) is DismissalState.NOT_DISMISSED

    def test_unresolved_is_distinct(self):
        assert DismissalState.UNRESOLVED is not DismissalState.NOT_DISMISSED

from datetime import datetime, timezone

import pytest

from snipvault.client.dashboard import (
    COPY_FEEDBACK_SECONDS,
    PLACEHOLDER_CARDS,
    DashboardController,
    DashboardStatus,
    InvalidTransition,
)
from snipvault.db import schemas
from snipvault.errors import Forbidden, InternalError


ALL_ON = {"edit_mode": True, "syntax_highlighting": True, "empty_state_illustration": True}


def _snippet(sid, heading="Fib", code="def fib(n): ...", language="Python", tags=("math",)):
    now = datetime(2026, 1, 1, tzinfo=timezone.utc)
    return schemas.Snippet(
        id=sid,
        heading=heading,
        code=code,
        language=language,
        owner_id=1,
        tags=[schemas.Tag(id=i, name=n) for i, n in enumerate(tags, start=1)],
        created_at=now,
        updated_at=now,
    )


class FakeApi:
    def __init__(self, snippets=None, list_error=None):
        self.snippets = list(snippets or [])
        self.list_error = list_error
        self.update_error = None
        self.delete_error = None
        self.updates = []
        self.deletes = []
        self.seen_status = None
        self.controller = None

    def list_snippets(self):
        if self.controller is not None:
            self.seen_status = self.controller.status
        if self.list_error:
            raise self.list_error
        return list(self.snippets)

    def update_snippet(self, snippet_id, **changes):
        if self.update_error:
            raise self.update_error
        self.updates.append((snippet_id, changes))
        current = next(s for s in self.snippets if s.id == snippet_id)
        return current.model_copy(update=changes)

    def delete_snippet(self, snippet_id):
        if self.delete_error:
            raise self.delete_error
        self.deletes.append(snippet_id)
        return "Snippet deleted successfully"


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


def _loaded(snippets, flags=ALL_ON, clock=None):
    api = FakeApi(snippets)
    ctl = DashboardController(api, flags=flags, clock=clock or FakeClock())
    ctl.load()
    return ctl, api


def test_load_transitions_through_loading():
    api = FakeApi([_snippet(1)])
    ctl = DashboardController(api, flags=ALL_ON)
    api.controller = ctl
    assert ctl.status is DashboardStatus.IDLE
    assert ctl.placeholder_count == 0
    ctl.load()
    assert api.seen_status is DashboardStatus.LOADING
    assert ctl.status is DashboardStatus.LOADED
    assert [s.id for s in ctl.snippets] == [1]


def test_placeholders_only_while_loading():
    ctl = DashboardController(FakeApi(), flags=ALL_ON)
    ctl.status = DashboardStatus.LOADING
    assert ctl.placeholder_count == PLACEHOLDER_CARDS


def test_load_failure_is_terminal():
    ctl = DashboardController(FakeApi(list_error=InternalError("Failed to fetch")), flags=ALL_ON)
    ctl.load()
    assert ctl.status is DashboardStatus.ERROR
    assert ctl.error == "Failed to fetch"
    with pytest.raises(InvalidTransition):
        ctl.load()


def test_empty_state_respects_flag():
    ctl, _ = _loaded([])
    assert ctl.is_empty
    assert ctl.show_empty_illustration

    ctl_off, _ = _loaded([], flags={**ALL_ON, "empty_state_illustration": False})
    assert ctl_off.is_empty
    assert not ctl_off.show_empty_illustration


def test_cards_preview_and_highlighting():
    long_code = "x" * 150
    ctl, _ = _loaded([_snippet(1, code=long_code, tags=("math", "recursion"))])
    card = ctl.cards()[0]
    assert card.preview == "x" * 100 + "..."
    assert card.tags == ["math", "recursion"]
    assert card.highlight_language == "python"

    ctl_plain, _ = _loaded([_snippet(1)], flags={**ALL_ON, "syntax_highlighting": False})
    assert ctl_plain.cards()[0].highlight_language is None


def test_open_and_close_detail():
    ctl, _ = _loaded([_snippet(1), _snippet(2, heading="Other")])
    assert ctl.open(2).heading == "Other"
    assert ctl.selected.id == 2
    ctl.close()
    assert ctl.selected is None
    with pytest.raises(KeyError):
        ctl.open(99)


def test_open_requires_loaded_list():
    ctl = DashboardController(FakeApi(), flags=ALL_ON)
    with pytest.raises(InvalidTransition):
        ctl.open(1)


def test_copy_indicator_clears_after_two_seconds():
    clock = FakeClock()
    ctl, _ = _loaded([_snippet(1)], clock=clock)
    ctl.open(1)
    assert ctl.copy_code() is True
    assert ctl.clipboard.text == "def fib(n): ..."
    assert ctl.copied is True
    clock.now += COPY_FEEDBACK_SECONDS - 0.5
    assert ctl.copied is True
    clock.now += 0.5
    assert ctl.copied is False


def test_copy_indicator_resets_on_open_and_close():
    ctl, _ = _loaded([_snippet(1), _snippet(2)])
    ctl.open(1)
    ctl.copy_code()
    ctl.open(2)
    assert ctl.copied is False
    ctl.copy_code()
    ctl.close()
    assert ctl.copied is False
    assert ctl.copy_code() is False


def test_edit_save_sends_changed_fields_only():
    ctl, api = _loaded([_snippet(1)])
    ctl.open(1)
    ctl.start_edit()
    ctl.stage(heading="Fibonacci")
    updated = ctl.save()
    assert api.updates == [(1, {"heading": "Fibonacci"})]
    assert updated.heading == "Fibonacci"
    assert ctl.selected.heading == "Fibonacci"
    assert ctl.snippets[0].heading == "Fibonacci"
    assert not ctl.editing


def test_edit_save_without_changes_skips_request():
    ctl, api = _loaded([_snippet(1)])
    ctl.open(1)
    ctl.start_edit()
    assert ctl.save().id == 1
    assert api.updates == []
    assert not ctl.editing


def test_cancel_edit_discards_draft():
    ctl, api = _loaded([_snippet(1)])
    ctl.open(1)
    ctl.start_edit()
    ctl.stage(code="changed")
    ctl.cancel_edit()
    assert not ctl.editing
    assert ctl.selected.code == "def fib(n): ..."
    assert api.updates == []


def test_stage_rejects_non_editable_fields():
    ctl, _ = _loaded([_snippet(1)])
    ctl.open(1)
    ctl.start_edit()
    with pytest.raises(ValueError):
        ctl.stage(tags=["x"])


def test_edit_mode_disabled_by_flag():
    ctl, _ = _loaded([_snippet(1)], flags={**ALL_ON, "edit_mode": False})
    ctl.open(1)
    with pytest.raises(InvalidTransition):
        ctl.start_edit()


def test_failed_save_keeps_state_and_records_error():
    ctl, api = _loaded([_snippet(1)])
    api.update_error = Forbidden()
    ctl.open(1)
    ctl.start_edit()
    ctl.stage(heading="Nope")
    assert ctl.save() is None
    assert ctl.editing
    assert isinstance(ctl.last_action_error, Forbidden)
    assert ctl.snippets[0].heading == "Fib"


def test_delete_requires_confirmation():
    ctl, api = _loaded([_snippet(1), _snippet(2)])
    ctl.open(1)
    assert ctl.delete_selected(lambda s: False) is False
    assert api.deletes == []
    assert ctl.selected.id == 1

    assert ctl.delete_selected(lambda s: s.id == 1) is True
    assert api.deletes == [1]
    assert [s.id for s in ctl.snippets] == [2]
    assert ctl.selected is None


def test_failed_delete_keeps_list():
    ctl, api = _loaded([_snippet(1)])
    api.delete_error = InternalError()
    ctl.open(1)
    assert ctl.delete_selected(lambda s: True) is False
    assert [s.id for s in ctl.snippets] == [1]
    assert ctl.selected.id == 1
    assert isinstance(ctl.last_action_error, InternalError)

# -*- coding: utf-8 -*-
"""
Tests for WizardContainer.

Tests cover:
- Step rendering and footer/header state
- Attempted-mode error panel
- Save, cancel and skip wiring
- Draft autosave that never blocks navigation
"""

import pytest
from PyQt5.QtWidgets import QLineEdit

from repositories.draft_repository import DraftRepository
from ui.wizards.framework import (
    BaseStep, WizardConfig, WizardContainer, WizardState, WizardStepDefinition
)


def require(field):
    def validate(step_data, all_data):
        return [] if step_data.get(field) else [f"{field} is required"]
    return validate


class NameStep(BaseStep):
    """Single text input bound to the "name" field."""

    def setup_ui(self):
        self.name_input = QLineEdit()
        self.main_layout.addWidget(self.name_input)
        self.received_errors = []

    def populate_data(self, data):
        self.name_input.setText(data.get("name", ""))

    def connect_signals(self):
        self.name_input.textChanged.connect(lambda text: self.save_to_context("name", text))

    def on_props_updated(self, props):
        self.received_errors = list(props.errors)


class BrokenRepository:
    """Draft store whose writes always fail."""

    def __init__(self):
        self.deleted = []

    def save(self, key, state):
        raise OSError("disk full")

    def delete(self, key):
        self.deleted.append(key)
        return True


@pytest.fixture
def qapp(qapp):
    """Ensure QApplication is available."""
    return qapp


def make_config(persist_key=None, allow_cancel=True):
    return WizardConfig(
        steps=[
            WizardStepDefinition(id="details", title="Details", renderer=NameStep.renderer(),
                                 validate=require("name")),
            WizardStepDefinition(id="extras", title="Extras", can_skip=True),
            WizardStepDefinition(id="finish", title="Finish", validate=require("confirmed")),
        ],
        title="Test Wizard",
        allow_cancel=allow_cancel,
        persist_key=persist_key,
    )


@pytest.fixture
def completed():
    return []


@pytest.fixture
def cancelled():
    return []


@pytest.fixture
def wizard(qtbot, completed, cancelled):
    container = WizardContainer(
        make_config(),
        on_complete=completed.append,
        on_cancel=lambda: cancelled.append(True),
        confirm_cancel=lambda: True,
    )
    qtbot.addWidget(container)
    return container


class TestInitialRender:
    """First step and chrome."""

    def test_first_step_rendered(self, wizard):
        assert wizard.current_step_widget.objectName() == "step_details"
        assert isinstance(wizard.current_step_widget, NameStep)

    def test_footer_state(self, wizard):
        assert wizard.footer.btn_back.isEnabled() is False
        assert wizard.footer.btn_next.isEnabled() is False
        assert wizard.footer.btn_next.text() == "Next"
        assert wizard.footer.btn_skip.isHidden() is True
        assert wizard.footer.btn_cancel.isHidden() is False

    def test_header_state(self, wizard):
        assert wizard.header.progress_label.text() == "Step 1 of 3"
        assert wizard.header.step_title_label.text() == "Details"
        assert [b.objectName() for b in wizard.header.step_buttons()] == [
            "step_details", "step_extras", "step_finish"
        ]

    def test_no_errors_before_attempt(self, wizard):
        assert wizard.error_label.isHidden() is True
        assert wizard.current_step_widget.received_errors == []


class TestEditing:
    """Step edits flow into wizard state."""

    def test_edit_enables_next(self, wizard):
        wizard.current_step_widget.name_input.setText("Alice")

        assert wizard.navigator.data["details"] == {"name": "Alice"}
        assert wizard.footer.btn_next.isEnabled() is True

    def test_step_data_changed_signal(self, wizard, qtbot):
        with qtbot.waitSignal(wizard.current_step_widget.step_data_changed) as blocker:
            wizard.current_step_widget.name_input.setText("Bob")
        assert blocker.args == [{"name": "Bob"}]

    def test_props_expose_all_data_read_only(self, wizard):
        props = wizard.build_props()
        with pytest.raises(TypeError):
            props.all_wizard_data["details"] = {}


class TestNavigation:
    """Next, back, skip and step buttons."""

    def test_attempted_errors_shown(self, wizard):
        wizard.current_step_widget.request_next()

        assert wizard.error_label.isHidden() is False
        assert wizard.error_label.text() == "• name is required"
        assert wizard.current_step_widget.received_errors == ["name is required"]

    def test_next_renders_next_step(self, wizard):
        wizard.current_step_widget.name_input.setText("Alice")
        wizard.footer.btn_next.click()

        assert wizard.current_step_widget.objectName() == "step_extras"
        assert wizard.header.progress_label.text() == "Step 2 of 3"
        assert wizard.footer.btn_back.isEnabled() is True
        assert wizard.footer.btn_skip.isHidden() is False

    def test_back_restores_inputs(self, wizard):
        wizard.current_step_widget.name_input.setText("Alice")
        wizard.footer.btn_next.click()
        wizard.footer.btn_back.click()

        assert wizard.current_step_widget.objectName() == "step_details"
        assert wizard.current_step_widget.name_input.text() == "Alice"
        assert wizard.navigator.state.completed_step_ids == frozenset()

    def test_skip_reaches_last_step(self, wizard):
        wizard.current_step_widget.name_input.setText("Alice")
        wizard.footer.btn_next.click()
        wizard.footer.btn_skip.click()

        assert wizard.navigator.get_current_step().id == "finish"
        assert wizard.footer.btn_next.text() == "Save"
        assert wizard.footer.btn_next.isEnabled() is False

    def test_header_step_button_jumps_back(self, wizard):
        wizard.current_step_widget.name_input.setText("Alice")
        wizard.footer.btn_next.click()

        wizard.header.step_buttons()[0].click()

        assert wizard.navigator.get_current_step().id == "details"

    def test_unreachable_step_button_disabled(self, wizard):
        assert wizard.header.step_buttons()[2].isEnabled() is False


class TestSave:
    """Completing the run."""

    def test_save_hands_off_data(self, wizard, completed, qtbot):
        wizard.current_step_widget.name_input.setText("Alice")
        wizard.footer.btn_next.click()
        wizard.footer.btn_skip.click()
        wizard.navigator.update_step_data({"confirmed": True})

        with qtbot.waitSignal(wizard.wizard_completed):
            wizard.footer.btn_next.click()

        assert completed == [{"details": {"name": "Alice"}, "finish": {"confirmed": True}}]

    def test_failed_save_shows_first_failing_step(self, qtbot, completed):
        state = WizardState(current_step_id="finish", data={"finish": {"confirmed": True}})
        container = WizardContainer(make_config(), on_complete=completed.append,
                                    confirm_cancel=lambda: True, initial_state=state)
        qtbot.addWidget(container)

        container.footer.btn_next.click()

        assert completed == []
        assert container.navigator.get_current_step().id == "details"
        assert container.error_label.text() == "• name is required"


class TestCancel:
    """Cancel needs confirmation and can be disallowed."""

    def test_confirmed_cancel(self, wizard, cancelled, qtbot):
        with qtbot.waitSignal(wizard.wizard_cancelled):
            wizard.footer.btn_cancel.click()
        assert cancelled == [True]

    def test_declined_cancel(self, qtbot, cancelled):
        container = WizardContainer(make_config(), on_cancel=lambda: cancelled.append(True),
                                    confirm_cancel=lambda: False)
        qtbot.addWidget(container)

        container.footer.btn_cancel.click()

        assert cancelled == []

    def test_cancel_not_allowed(self, qtbot, cancelled):
        asked = []
        container = WizardContainer(make_config(allow_cancel=False),
                                    on_cancel=lambda: cancelled.append(True),
                                    confirm_cancel=lambda: asked.append(True) or True)
        qtbot.addWidget(container)

        assert container.footer.btn_cancel.isHidden() is True
        container._handle_cancel()
        assert asked == []
        assert cancelled == []


class TestAutosave:
    """Draft snapshots after navigation."""

    def test_snapshot_saved_after_next(self, qtbot, tmp_path):
        repository = DraftRepository(tmp_path)
        container = WizardContainer(make_config(persist_key="test-draft"),
                                    draft_repository=repository, confirm_cancel=lambda: True)
        qtbot.addWidget(container)
        container.current_step_widget.name_input.setText("Alice")

        with qtbot.waitSignal(container.draft_saved) as blocker:
            container.footer.btn_next.click()

        assert blocker.args == ["test-draft"]
        snapshot = repository.load("test-draft")
        assert snapshot["current_step_id"] == "extras"
        assert snapshot["data"]["details"] == {"name": "Alice"}

    def test_no_persist_key_no_draft(self, qtbot, tmp_path):
        repository = DraftRepository(tmp_path)
        container = WizardContainer(make_config(), draft_repository=repository,
                                    confirm_cancel=lambda: True)
        qtbot.addWidget(container)
        container.current_step_widget.name_input.setText("Alice")
        container.footer.btn_next.click()

        assert repository.list_keys() == []

    def test_failed_autosave_does_not_block(self, qtbot):
        repository = BrokenRepository()
        container = WizardContainer(make_config(persist_key="test-draft"),
                                    draft_repository=repository, confirm_cancel=lambda: True)
        qtbot.addWidget(container)
        container.current_step_widget.name_input.setText("Alice")

        container.footer.btn_next.click()

        assert container.navigator.get_current_step().id == "extras"
        assert container.notice_label.isHidden() is False
        assert "saving draft" in container.notice_label.text()
        assert container.autosave_boundary.error_count == 1

    def test_cancel_discards_draft(self, qtbot, tmp_path):
        repository = DraftRepository(tmp_path)
        repository.save("test-draft", {"current_step_id": "details"})
        container = WizardContainer(make_config(persist_key="test-draft"),
                                    draft_repository=repository, confirm_cancel=lambda: True)
        qtbot.addWidget(container)

        container.footer.btn_cancel.click()

        assert repository.exists("test-draft") is False

"""
Unit tests for the admin command dispatcher.
"""

from __future__ import annotations

from admin_state_manager import FormMode
from portal.resources import ResourceKind
from portal.signals import (
    AdminActionRequested,
    AdminIntent,
    AdminSection,
    CommandDispatcher,
    OpenAddForm,
)


class TestCommandDispatcher:
    def test_delivers_to_subscribers(self) -> None:
        dispatcher = CommandDispatcher()
        received = []
        dispatcher.subscribe(AdminActionRequested, received.append)

        command = AdminActionRequested(AdminSection.TEAM)
        dispatcher.publish(command)

        assert received == [command]
        assert command.intent is AdminIntent.VIEW

    def test_pending_command_handed_to_first_subscriber_once(self) -> None:
        dispatcher = CommandDispatcher()
        dispatcher.publish(AdminActionRequested(AdminSection.TEAM))
        dispatcher.publish(AdminActionRequested(AdminSection.EVENTS, AdminIntent.ADD))

        first, second = [], []
        dispatcher.subscribe(AdminActionRequested, first.append)
        dispatcher.subscribe(AdminActionRequested, second.append)

        assert first == [AdminActionRequested(AdminSection.EVENTS, AdminIntent.ADD)]
        assert second == []

    def test_open_add_form_is_keyed_by_section(self) -> None:
        dispatcher = CommandDispatcher()
        projects, events = [], []
        dispatcher.subscribe(OpenAddForm, projects.append, section=AdminSection.PROJECTS)
        dispatcher.subscribe(OpenAddForm, events.append, section=AdminSection.EVENTS)

        dispatcher.publish(OpenAddForm(AdminSection.EVENTS))

        assert projects == []
        assert events == [OpenAddForm(AdminSection.EVENTS)]

    def test_unsubscribe(self) -> None:
        dispatcher = CommandDispatcher()
        received = []
        dispatcher.subscribe(AdminActionRequested, received.append)
        dispatcher.unsubscribe(AdminActionRequested, received.append)

        dispatcher.publish(AdminActionRequested(AdminSection.TEAM))

        assert received == []

    def test_subscribing_twice_delivers_once(self) -> None:
        dispatcher = CommandDispatcher()
        received = []
        dispatcher.subscribe(AdminActionRequested, received.append)
        dispatcher.subscribe(AdminActionRequested, received.append)

        dispatcher.publish(AdminActionRequested(AdminSection.TEAM))

        assert len(received) == 1


class TestQuickActions:
    def test_quick_action_opens_the_target_add_form(self, admin) -> None:
        sections = []

        def on_action(command: AdminActionRequested) -> None:
            sections.append(command.section)
            if command.intent is AdminIntent.ADD:
                admin.dispatcher.publish(OpenAddForm(command.section))

        admin.dispatcher.subscribe(AdminActionRequested, on_action)
        admin.dispatcher.publish(AdminActionRequested(AdminSection.ANNOUNCEMENTS, AdminIntent.ADD))

        assert sections == [AdminSection.ANNOUNCEMENTS]
        announcements = admin.manager(ResourceKind.ANNOUNCEMENTS)
        assert announcements.form.mode is FormMode.ADD
        assert not announcements.loaded

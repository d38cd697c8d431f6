"""Tests for the one-time session setup."""

from pathlib import Path

import pytest

from obsidian_nav import highlights
from obsidian_nav.constants import MSG_TAG, OPEN_COMMAND
from obsidian_nav.core.setup_operations import setup
from obsidian_nav.errors import AlreadySetup, BadPreferences, HostError
from obsidian_nav.plugin import load


class TestSetupOperation:
    """Direct calls to the setup sequence, without the wrapper."""

    def test_setup_without_preferences(self, client, host):
        setup(client)

        assert client.already_setup
        assert client.notes_dir == Path("./")
        assert OPEN_COMMAND in host.commands
        assert set(host.highlights) == set(highlights.HIGHLIGHT_LINKS)

    def test_setup_with_preferences(self, client):
        setup(client, {"notes_dir": "/srv/notes"})
        assert client.notes_dir == Path("/srv/notes")

    def test_highlights_link_to_builtin_groups_as_defaults(self, client, host):
        setup(client)
        assert host.highlights[highlights.ERROR_MSG_TAG] == {"link": "ErrorMsg", "default": True}
        assert host.highlights[highlights.BAD_OPTION_PATH] == {"link": "Statement", "default": True}

    def test_command_definition(self, client, host):
        setup(client)
        command = host.commands[OPEN_COMMAND]
        assert command["nargs"] == "?"
        assert command["bang"] is True
        assert command["desc"]

    def test_second_setup_fails_and_keeps_first_config(self, client, host):
        setup(client, {"notes_dir": "first"})
        host.highlights.clear()
        host.commands.clear()

        with pytest.raises(AlreadySetup):
            setup(client, {"notes_dir": "second"})

        assert client.notes_dir == Path("first")
        assert host.highlights == {}
        assert host.commands == {}

    def test_bad_preferences_leave_session_uninitialized(self, client, host):
        with pytest.raises(BadPreferences) as exc_info:
            setup(client, {"notes_dir": "x", "bogus": 1})

        assert exc_info.value.path == "bogus"
        assert not client.already_setup
        assert host.commands == {}
        # Highlights were defined before the preferences were read.
        assert set(host.highlights) == set(highlights.HIGHLIGHT_LINKS)

    def test_setup_can_be_retried_after_bad_preferences(self, client):
        with pytest.raises(BadPreferences):
            setup(client, {"bogus": 1})
        setup(client, {"notes_dir": "ok"})
        assert client.already_setup
        assert client.notes_dir == Path("ok")

    def test_command_registration_failure_leaves_session_uninitialized(self, client, host):
        host.fail_command = OPEN_COMMAND
        with pytest.raises(HostError):
            setup(client, {"notes_dir": "x"})
        assert not client.already_setup
        assert client.notes_dir == Path("./")


class TestSetupThroughApi:
    """Setup as the host calls it, through the wrapped public API."""

    def test_setup_once(self, host):
        api = load(host)
        assert api["setup"]({"notes_dir": "notes"}) is None
        assert OPEN_COMMAND in host.commands
        assert host.messages == []

    def test_second_setup_is_reported(self, host):
        api = load(host)
        api["setup"]()
        api["setup"]()
        assert host.message_texts() == [f"{MSG_TAG} can't setup more than once per session"]

    def test_unknown_key_is_reported_with_path(self, host):
        api = load(host)
        api["setup"]({"notes_dir": "notes", "bogus": 1})

        [message] = host.messages
        assert message[0] == (MSG_TAG, highlights.ERROR_MSG_TAG)
        assert ("bogus", highlights.BAD_OPTION_PATH) in message
        assert OPEN_COMMAND not in host.commands

    def test_host_failure_reaches_the_host(self, host):
        host.fail_command = OPEN_COMMAND
        api = load(host)
        with pytest.raises(HostError):
            api["setup"]()

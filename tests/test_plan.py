"""Tests for gitu.switch.plan"""

from pathlib import Path

from gitu.identities import Identity
from gitu.switch.plan import (
    SSH_COMMAND,
    USER_EMAIL,
    USER_NAME,
    ConfigDirective,
    build_plan,
    expand_home,
    ssh_command,
)


class TestExpandHome:
    """Tests for expand_home."""

    def test_leading_tilde(self):
        assert expand_home("~/.ssh/id_work", Path("/home/u")) == "/home/u/.ssh/id_work"

    def test_bare_tilde(self):
        assert expand_home("~", Path("/home/u")) == "/home/u"

    def test_absolute_path_unchanged(self):
        assert expand_home("/keys/id_work", Path("/home/u")) == "/keys/id_work"

    def test_inner_tilde_unchanged(self):
        assert expand_home("/keys/~backup", Path("/home/u")) == "/keys/~backup"


class TestConfigDirective:
    """Tests for ConfigDirective."""

    def test_set_args(self):
        directive = ConfigDirective(key=USER_EMAIL, value="jane@co.com")
        assert directive.config_args() == ["user.email", "jane@co.com"]
        assert not directive.is_unset

    def test_unset_args(self):
        directive = ConfigDirective(key=SSH_COMMAND)
        assert directive.config_args() == ["--unset", "core.sshCommand"]
        assert directive.is_unset

    def test_display_escapes_quotes(self):
        """Quotes in the value are shown backslash-escaped."""
        directive = ConfigDirective(key=USER_NAME, value='O"Brien')
        assert directive.display() == 'git config user.name "O\\"Brien"'

    def test_raw_value_is_not_escaped(self):
        """git receives the value exactly as stored."""
        directive = ConfigDirective(key=USER_NAME, value='O"Brien')
        assert directive.config_args() == ["user.name", 'O"Brien']

    def test_display_unset(self):
        assert ConfigDirective(key=SSH_COMMAND).display() == "git config --unset core.sshCommand"


class TestSshCommand:
    """Tests for ssh_command."""

    def test_forces_single_identity(self):
        command = ssh_command("/home/u/.ssh/id_work")
        assert command == "ssh -i /home/u/.ssh/id_work -o IdentitiesOnly=yes -F /dev/null"

    def test_quotes_paths_with_spaces(self):
        command = ssh_command("/home/u/my keys/id")
        assert "-i '/home/u/my keys/id'" in command

    def test_custom_client(self):
        assert ssh_command("/k", ssh_executable="/usr/bin/ssh").startswith("/usr/bin/ssh -i /k")


class TestBuildPlan:
    """Tests for build_plan."""

    def test_order_without_key(self):
        """name, email, then unset of the SSH override."""
        identity = Identity(display_name="Jane Doe", email="jane@co.com")
        plan = build_plan("work", identity, home=Path("/home/u"))
        assert plan.identity_id == "work"
        assert plan.directives == [
            ConfigDirective(key=USER_NAME, value="Jane Doe"),
            ConfigDirective(key=USER_EMAIL, value="jane@co.com"),
            ConfigDirective(key=SSH_COMMAND),
        ]

    def test_ssh_key_under_home(self):
        """A ~ key path is expanded into an identities-only SSH override."""
        identity = Identity(
            display_name="Jane Doe", email="jane@co.com", ssh_key_path="~/.ssh/id_work"
        )
        plan = build_plan("work", identity, home=Path("/home/u"))
        ssh = plan.directives[2]
        assert ssh.key == "core.sshCommand"
        assert "/home/u/.ssh/id_work" in ssh.value
        assert "IdentitiesOnly=yes" in ssh.value

    def test_email_verbatim(self):
        identity = Identity(display_name="J", email=' "odd" @co.com ')
        plan = build_plan("x", identity, home=Path("/home/u"))
        assert plan.directives[1].value == ' "odd" @co.com '

    def test_quoted_name_directive(self):
        """A quote in the display name shows up escaped in the directive."""
        identity = Identity(display_name='O"Brien', email="ob@co.com")
        plan = build_plan("x", identity, home=Path("/home/u"))
        assert 'O\\"Brien' in plan.directives[0].display()

    def test_defaults_to_real_home(self, home: Path):
        identity = Identity(display_name="J", email="j@co.com", ssh_key_path="~/.ssh/k")
        plan = build_plan("x", identity)
        assert str(home / ".ssh" / "k") in plan.directives[2].value

    def test_empty_key_path_unsets(self):
        identity = Identity(display_name="J", email="j@co.com", ssh_key_path="")
        plan = build_plan("x", identity, home=Path("/home/u"))
        assert plan.directives[2].is_unset

import socket
import subprocess
import pytest
from unittest.mock import MagicMock

from models.errors import NotifyActionError, UnresolvableHostError
from services.notifier import SSHNotifier, DEFAULT_IDENTITY, DEFAULT_URL


@pytest.fixture
def resolver():
    return MagicMock(return_value=[(socket.AF_INET, socket.SOCK_STREAM, 6, "", ("10.0.0.2", 0))])


@pytest.fixture
def runner():
    return MagicMock(return_value=subprocess.CompletedProcess(args=[], returncode=0))


@pytest.fixture
def notifier(resolver, runner):
    return SSHNotifier(resolver=resolver, runner=runner)


def test_build_command():
    cmd = SSHNotifier().build_command("desktop.lan", "reuben")

    assert cmd == [
        "ssh", "-y", "-i", DEFAULT_IDENTITY, "reuben@desktop.lan",
        f"DISPLAY=:0 xdg-open '{DEFAULT_URL}'",
    ]


def test_success_resolves_then_runs(notifier, resolver, runner):
    notifier.notify("desktop.lan", "reuben")

    resolver.assert_called_once_with("desktop.lan", None)
    runner.assert_called_once()
    assert runner.call_args.args[0][4] == "reuben@desktop.lan"


def test_unresolvable_host_skips_action(notifier, resolver, runner):
    resolver.side_effect = socket.gaierror(socket.EAI_NONAME, "Name or service not known")

    with pytest.raises(UnresolvableHostError) as exc:
        notifier.notify("nowhere.invalid", "reuben")

    runner.assert_not_called()
    assert exc.value.code == "UNRESOLVABLE_HOST"
    assert exc.value.host == "nowhere.invalid"


def test_nonzero_exit_is_action_error(notifier, runner):
    runner.return_value = subprocess.CompletedProcess(args=[], returncode=255)

    with pytest.raises(NotifyActionError) as exc:
        notifier.notify("desktop.lan", "reuben")

    assert exc.value.status == 255
    assert exc.value.code == "NOTIFY_ACTION_FAILED"


def test_missing_ssh_binary_is_action_error(notifier, runner):
    runner.side_effect = FileNotFoundError(2, "No such file or directory", "ssh")

    with pytest.raises(NotifyActionError) as exc:
        notifier.notify("desktop.lan", "reuben")

    assert exc.value.status is None

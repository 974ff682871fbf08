import errno
import os

import pytest

from pipex.command import find_executable, parse_command, resolve_command, search_paths
from pipex.errors import CommandError


def _make_tool(directory, name="tool", mode=0o755):
    path = directory / name
    path.write_text("#!/bin/sh\nexit 0\n")
    path.chmod(mode)
    return path


def test_search_paths_splits_and_drops_empty():
    assert search_paths({"PATH": "/a:/b::/c:"}) == ["/a", "/b", "/c"]


def test_search_paths_without_path():
    assert search_paths({"HOME": "/home"}) == []


def test_find_executable_first_match(tmp_path):
    first = tmp_path / "one"
    second = tmp_path / "two"
    first.mkdir()
    second.mkdir()
    _make_tool(second)
    _make_tool(first)
    environ = {"PATH": f"{first}:{second}"}
    assert find_executable("tool", environ) == f"{first}/tool"


def test_find_executable_skips_non_executable(tmp_path):
    _make_tool(tmp_path, mode=0o644)
    assert find_executable("tool", {"PATH": str(tmp_path)}) is None


def test_find_executable_no_path(tmp_path):
    _make_tool(tmp_path)
    assert find_executable("tool", {}) is None


def test_parse_command_collapses_spaces():
    assert parse_command("ls  -l -a ") == ["ls", "-l", "-a"]


@pytest.mark.parametrize("cmd", ["", " ls", "   "])
def test_parse_command_rejects_empty_or_leading_space(cmd):
    with pytest.raises(CommandError) as info:
        parse_command(cmd)
    assert info.value.errno == errno.EINVAL


def test_resolve_command_via_path(tmp_path):
    _make_tool(tmp_path)
    path, argv = resolve_command("tool -x", {"PATH": str(tmp_path)})
    assert path == f"{tmp_path}/tool"
    assert argv == ["tool", "-x"]


def test_resolve_command_absolute(tmp_path):
    tool = _make_tool(tmp_path)
    path, argv = resolve_command(str(tool), {})
    assert path == str(tool)
    assert argv == [str(tool)]


def test_resolve_command_absolute_with_arguments_is_not_found(tmp_path):
    tool = _make_tool(tmp_path)
    with pytest.raises(CommandError) as info:
        resolve_command(f"{tool} -x", {"PATH": str(tmp_path)})
    assert info.value.errno == errno.ENOENT


def test_resolve_command_unknown(tmp_path):
    with pytest.raises(CommandError) as info:
        resolve_command("no-such-tool", {"PATH": str(tmp_path)})
    assert "no-such-tool" in str(info.value)
    assert os.path.exists(tmp_path)
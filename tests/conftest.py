"""
Pytest configuration and shared fixtures for tinysh tests.

This module provides reusable test fixtures for:
- Temporary search path directories with executables
- Contexts bound to an isolated environment
- Captured output streams
"""

import io
import os
import stat

import pytest

from tinysh.context import CommandContext
from tinysh.dispatcher import Dispatcher
from tinysh.process import Process


# ============================================================================
# Helpers
# ============================================================================

def make_file(directory, name, content="#!/bin/sh\necho hello\n", mode=0o755):
    """
    Create a file in directory with the given permission bits.

    Returns:
        str: Absolute path of the new file
    """
    path = directory / name
    path.write_text(content)
    os.chmod(path, mode)
    return str(path)


# ============================================================================
# Pytest Fixtures
# ============================================================================

@pytest.fixture
def bin_dirs(tmp_path):
    """
    Provides two empty directories meant for the search path.

    Returns:
        tuple: (first, second) pathlib.Path directories
    """
    first = tmp_path / "bin1"
    second = tmp_path / "bin2"
    first.mkdir()
    second.mkdir()
    return first, second


@pytest.fixture
def home_dir(tmp_path):
    """Provides a directory used as HOME"""
    home = tmp_path / "home"
    home.mkdir()
    return home


@pytest.fixture
def context(tmp_path, bin_dirs, home_dir):
    """
    Provides a CommandContext with an isolated environment.

    PATH holds the two bin_dirs in order; cwd is tmp_path.

    Example:
        def test_lookup(context, bin_dirs):
            make_file(bin_dirs[0], 'tool')
            assert PathResolver(context).resolve('tool') is not None
    """
    first, second = bin_dirs
    env = {
        'PATH': os.pathsep.join([str(first), str(second)]),
        'HOME': str(home_dir),
        'USER': 'tester',
    }
    return CommandContext(cwd=str(tmp_path), env=env)


@pytest.fixture
def capture_output():
    """
    Provides BytesIO objects for capturing command output.

    Returns:
        tuple: (stdout, stderr) BytesIO objects
    """
    return io.BytesIO(), io.BytesIO()


@pytest.fixture
def dispatcher(context, capture_output):
    """Provides a Dispatcher writing into capture_output"""
    stdout, stderr = capture_output
    return Dispatcher(context, stdout, stderr)


@pytest.fixture
def mock_process(context):
    """
    Provides a factory for Process instances bound to the test context.

    Example:
        def test_echo(mock_process):
            process = mock_process('echo', ['hi'])
            cmd_echo(process)
            assert process.get_stdout() == b'hi\\n'
    """
    def factory(command, args=None):
        return Process(command=command, args=list(args or []), context=context)
    return factory


@pytest.fixture
def no_exec_mode():
    """Permission bits for a readable file with no execute bit"""
    return stat.S_IRUSR | stat.S_IWUSR | stat.S_IRGRP | stat.S_IROTH


@pytest.fixture
def make_executable():
    """
    Provides make_file as a fixture.

    Example:
        def test_run(make_executable, bin_dirs):
            make_executable(bin_dirs[0], 'tool', '#!/bin/sh\\necho hi\\n')
    """
    return make_file

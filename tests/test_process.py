"""
Tests for Process class.

Tests cover:
- Process initialization
- Stream handling (stdout, stderr)
- Exit code management
- Exception handling during execution
"""

import io

import pytest

from tinysh.context import CommandContext
from tinysh.exceptions import ShellExit
from tinysh.path_resolver import PathResolver
from tinysh.process import Process


class TestProcessInitialization:
    """Test Process class initialization."""

    def test_process_creation_with_minimal_args(self):
        """Test creating process with minimal arguments."""
        process = Process(
            command='test',
            args=['arg1', 'arg2'],
        )

        assert process.command == 'test'
        assert process.args == ['arg1', 'arg2']
        assert process.stdout is not None
        assert process.stderr is not None
        assert isinstance(process.context, CommandContext)
        assert isinstance(process.resolver, PathResolver)
        assert process.resolver.context is process.context

    def test_process_with_custom_streams(self, capture_output):
        """Test creating process with custom streams."""
        stdout, stderr = capture_output

        process = Process(command='test', args=[], stdout=stdout, stderr=stderr)

        assert process.stdout is stdout
        assert process.stderr is stderr

    def test_process_with_context(self, context):
        """Test creating process with a context."""
        process = Process(command='test', args=[], context=context)

        assert process.context is context


class TestProcessStreams:
    """Test process stream handling."""

    def test_write_to_stdout(self):
        process = Process(command='test', args=[])
        process.write('Hello, World!')
        assert process.get_stdout() == b'Hello, World!'

    def test_write_to_stderr(self):
        process = Process(command='test', args=[])
        process.error('Error message')
        assert process.get_stderr() == b'Error message'


class TestProcessExecution:
    """Test process execution."""

    def test_execute_returns_exit_code(self):
        def executor(process):
            process.write('ran')
            return 3

        process = Process(command='test', args=[], executor=executor)

        assert process.execute() == 3
        assert process.exit_code == 3
        assert process.get_stdout() == b'ran'

    def test_execute_reports_exceptions(self):
        def executor(process):
            raise RuntimeError('boom')

        process = Process(command='test', args=[], executor=executor)

        assert process.execute() == 1
        assert process.get_stderr() == b"Error executing 'test': boom\n"

    def test_shell_exit_propagates(self):
        def executor(process):
            raise ShellExit(4)

        process = Process(command='exit', args=[], executor=executor)

        with pytest.raises(ShellExit) as exc_info:
            process.execute()
        assert exc_info.value.exit_code == 4

    def test_keyboard_interrupt_propagates(self):
        def executor(process):
            raise KeyboardInterrupt

        process = Process(command='test', args=[], executor=executor)

        with pytest.raises(KeyboardInterrupt):
            process.execute()

    def test_repr(self):
        process = Process(command='echo', args=['a', 'b'], stdout=io.BytesIO())
        assert repr(process) == 'Process(echo a b)'

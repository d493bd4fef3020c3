"""Tests the errors module."""

import copy
import pickle
from typing import Self
from unittest import TestCase

from hostport.address import try_from_parts, try_from_string
from hostport.errors import (
    EmptyInputError,
    ErrorKind,
    HostAndPortError,
    PortOutOfRangeError,
)


class TestHostAndPortError(TestCase):
    """Tests the HostAndPortError hierarchy."""

    def test_pickle_and_copy(self: Self) -> None:
        """Test that errors survive pickling and copying with their input intact."""
        for error in (try_from_string("foo:bar"), try_from_parts("foo", 123456)):
            assert isinstance(error, HostAndPortError)
            clones = (
                pickle.loads(pickle.dumps(error)),
                copy.copy(error),
                copy.deepcopy(error),
            )
            for clone in clones:
                with self.subTest(error=error, clone=clone):
                    self.assertIs(type(clone), type(error))
                    self.assertIs(clone.kind, error.kind)
                    self.assertEqual(clone.text, error.text)
                    self.assertEqual(str(clone), str(error))

    def test_message_and_kind(self: Self) -> None:
        """Test that the message is the only argument shown and kind is per class."""
        error = PortOutOfRangeError("Port number out of range: 123456", 123456)
        self.assertEqual(str(error), "Port number out of range: 123456")
        self.assertIs(error.kind, ErrorKind.PORT_OUT_OF_RANGE)
        self.assertIs(EmptyInputError("empty", "").kind, ErrorKind.EMPTY_INPUT)

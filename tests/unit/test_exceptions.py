"""
Tests for the exception hierarchy
"""
import pytest

from labscape.core.exceptions import (
    CapacityExhaustedError,
    InvalidTopologyError,
    LabscapeException,
    MalformedInputError,
    UniquenessViolationError,
    UnresolvedReferenceError,
    WiringStateError,
    describe_error,
)


class TestLabscapeException:

    def test_message_and_context(self):
        error = UnresolvedReferenceError("no such network", operation="wire_system",
                                         system="Desktop", network="OtherNet")

        assert str(error) == "no such network"
        assert error.message == "no such network"
        assert error.operation == "wire_system"
        assert error.context == {'system': 'Desktop', 'network': 'OtherNet'}

    def test_default_operation(self):
        assert LabscapeException("boom").operation == "unknown"

    @pytest.mark.parametrize("error_class", [
        MalformedInputError,
        InvalidTopologyError,
        UniquenessViolationError,
        UnresolvedReferenceError,
        CapacityExhaustedError,
        WiringStateError,
    ])
    def test_hierarchy(self, error_class):
        error = error_class("failure")
        assert isinstance(error, LabscapeException)
        assert not isinstance(error, ValueError)

    def test_describe_error(self):
        error = CapacityExhaustedError("pool empty", operation="lease_address")

        assert describe_error(error) == "lease_address: pool empty"
        assert describe_error(error, "build") == "build: pool empty"
        assert describe_error(OSError("disk"), "write") == "write: disk"

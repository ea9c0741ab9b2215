"""Tests for guarded capability invocation."""

from cqlbridge.capabilities import (
    probe_call,
    signature_accepts,
    set_option_if_available,
    set_signature_level,
)
from cqlbridge.vocabulary import ProbeOutcome, SignatureLevel

from fake_engine import FakeSignatureLevel, TranslatorOptions


class Target:
    def __init__(self):
        self.calls = []

    def takes_one(self, value):
        self.calls.append(value)
        return value * 2

    def raises(self, value):
        raise RuntimeError("rejected")

    not_callable = 42


class TestSignatureAccepts:

    def test_matching_shape(self):
        assert signature_accepts(Target().takes_one, (1,)) is True

    def test_wrong_arity(self):
        assert signature_accepts(Target().takes_one, (1, 2)) is False

    def test_uninspectable_is_unknown(self):
        # Some builtins expose no signature
        assert signature_accepts(dict.fromkeys, ("a",)) in (True, None)


class TestProbeCall:

    def test_applied(self):
        target = Target()
        result = probe_call(target, "takes_one", 21)
        assert result.applied
        assert result.value == 42
        assert target.calls == [21]

    def test_missing_operation(self):
        """Absent operation is skipped and nothing is called."""
        target = Target()
        result = probe_call(target, "setSomething", True)
        assert result.outcome is ProbeOutcome.SKIPPED_MISSING
        assert target.calls == []

    def test_non_callable_attribute(self):
        result = probe_call(Target(), "not_callable")
        assert result.outcome is ProbeOutcome.SKIPPED_MISSING

    def test_shape_mismatch_not_called(self):
        target = Target()
        result = probe_call(target, "takes_one", 1, 2)
        assert result.outcome is ProbeOutcome.SKIPPED_SIGNATURE
        assert target.calls == []

    def test_error_reported(self):
        result = probe_call(Target(), "raises", 1)
        assert result.outcome is ProbeOutcome.SKIPPED_ERROR
        assert result.error == "rejected"

    def test_no_target(self):
        result = probe_call(None, "anything")
        assert not result.applied


class TestSetOption:

    def test_available_setter(self):
        options = TranslatorOptions()
        assert set_option_if_available(options, "setStrict", True).applied
        assert options.applied == {"strict": True}

    def test_missing_setter_leaves_state(self):
        options = TranslatorOptions()
        result = set_option_if_available(options, "setValidateUnits", True)
        assert not result.applied
        assert options.applied == {}


class TestSetSignatureLevel:

    def test_enum_fallback(self):
        """String rejected, engine enum constant accepted."""
        options = TranslatorOptions()
        result = set_signature_level(options, SignatureLevel.OVERLOADS, FakeSignatureLevel)
        assert result.applied
        assert options.applied["signature_level"] is FakeSignatureLevel.OVERLOADS

    def test_no_enum_known(self):
        options = TranslatorOptions()
        result = set_signature_level(options, SignatureLevel.ALL)
        assert not result.applied
        assert "signature_level" not in options.applied

    def test_string_accepted(self):
        class StringOptions:
            level = None

            def setSignatureLevel(self, level):
                self.level = level

        options = StringOptions()
        assert set_signature_level(options, SignatureLevel.DIFFERING, FakeSignatureLevel).applied
        assert options.level == "Differing"

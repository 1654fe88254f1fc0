"""Tests for the facade: dispatch, registration, debug and guarded runs."""

import io
import warnings

import pytest
import yaml
from rich.console import Console

import toolbelt
from toolbelt import (
    ConfigManager,
    DuplicateHelperCollision,
    Facade,
    PromotedError,
    ReservedNameCollision,
    UnknownHelperMethod,
)
from toolbelt.helpers import DateTimeHelper
from toolbelt.utils.dumper import VarDumper


class TextHelper:
    @staticmethod
    def shout(text):
        return text.upper()


class ClashingTextHelper:
    @staticmethod
    def Shout(text):
        return text + "!"


class RunHelper:
    @staticmethod
    def Run():
        return "shadowed"


@pytest.fixture
def facade():
    instance = Facade()
    instance.register_helpers([DateTimeHelper, TextHelper])
    return instance


def test_helpers_are_callable_on_facade(facade):
    """Test registered helpers dispatch through attribute access."""
    assert facade.seconds("3 hours 4 minutes 10 seconds") == 11050
    assert facade.make_timestamp(1700000000.9) == 1700000000
    assert facade.shout("hi") == "HI"


def test_dispatch_ignores_case(facade):
    """Test helper names resolve regardless of case."""
    assert facade.SECONDS("5min") == 300
    assert facade.call("Seconds", "4.5h") == 16200


def test_unknown_helper_fails(facade):
    """Test unknown names raise UnknownHelperMethod naming the call."""
    with pytest.raises(UnknownHelperMethod) as exc_info:
        facade.no_such_helper("x")

    assert exc_info.value.method_name == "no_such_helper"
    assert "no_such_helper" in str(exc_info.value)

    with pytest.raises(UnknownHelperMethod):
        facade.call("missing")

    assert not hasattr(facade, "missing")


def test_private_names_are_not_dispatched(facade):
    """Test underscore names raise a plain AttributeError."""
    with pytest.raises(AttributeError) as exc_info:
        facade._nothing

    assert not isinstance(exc_info.value, UnknownHelperMethod)


def test_call_prefers_native_methods(facade):
    """Test call() runs facade methods before consulting helpers."""
    assert facade.call("is_debug") is False
    facade.call("set_debug", True)
    assert facade.is_debug() is True


def test_call_matches_native_methods_ignoring_case(facade):
    """Test call() finds facade methods in any case, like helpers."""
    assert facade.call("Run", lambda: "ran") == "ran"
    assert facade.call("IS_DEBUG") is False


def test_logger_is_not_a_public_attribute():
    """Test a helper named like the facade's logger stays reachable."""
    class LoggerHelper:
        @staticmethod
        def logger():
            return "helper logger"

    instance = Facade()
    instance.register_helpers([LoggerHelper])

    assert instance.logger() == "helper logger"
    assert instance.call("logger") == "helper logger"


def test_native_names_cannot_be_shadowed(facade):
    """Test helpers named like facade methods are rejected."""
    with pytest.raises(ReservedNameCollision):
        facade.register_helpers([RunHelper])

    with pytest.raises(ReservedNameCollision):
        facade.add_helper_method(TextHelper, "dump", lambda value: None)

    assert facade.resolve("run") is None


def test_duplicate_helpers_rejected(facade):
    """Test a second provider cannot claim an existing helper name."""
    with pytest.raises(DuplicateHelperCollision):
        facade.register_helpers([ClashingTextHelper])

    facade.register_helpers([TextHelper])
    assert facade.shout("ok") == "OK"


def test_register_helpers_from_dotted_path():
    """Test providers can be named by import path."""
    instance = Facade()
    instance.register_helpers(["toolbelt.helpers.datetime_helper.DateTimeHelper"])

    assert instance.resolve("seconds").provider is DateTimeHelper


@pytest.mark.parametrize("path", ["DateTimeHelper", "toolbelt.helpers.datetime_helper.Missing"])
def test_register_helpers_bad_path_fails(path):
    """Test malformed or missing provider paths are rejected."""
    with pytest.raises(ValueError):
        Facade().register_helpers([path])


def test_list_helpers(facade):
    """Test listing registered helpers."""
    names = [h["name"] for h in facade.list_helpers()]

    assert names == ["make_timestamp", "seconds", "shout"]


def test_debug_flag_defaults_off():
    """Test debug mode can be toggled."""
    instance = Facade()
    assert instance.is_debug() is False

    instance.set_debug(True)
    assert instance.is_debug() is True

    instance.set_debug()
    assert instance.is_debug() is False


def test_dump_prints_only_in_debug():
    """Test dump() writes through the dumper when debug is on."""
    output = io.StringIO()
    instance = Facade(dumper=VarDumper(console=Console(file=output, width=80)))

    instance.dump({"a": 1})
    assert output.getvalue() == ""

    instance.set_debug(True)
    instance.dump({"a": 1})
    assert "'a': 1" in output.getvalue()


def test_dumper_renders_repr():
    """Test the dumper's string rendering."""
    assert VarDumper().dump([1, 2]) == "[1, 2]"


def test_run_uses_exception_handler(facade):
    """Test run() routes failures to the configured handler."""
    calls = []

    def handler(exc):
        calls.append(exc)
        return "handled"

    def noisy():
        warnings.warn("noisy", UserWarning)

    facade.set_exception_handler(handler)

    assert facade.get_exception_handler() is handler
    assert facade.run(noisy) == "handled"
    assert len(calls) == 1
    assert isinstance(calls[0], PromotedError)


def test_run_returns_result_untouched(facade):
    """Test run() returns the callable's result on success."""
    facade.set_exception_handler(lambda exc: pytest.fail("handler should not run"))

    assert facade.run(facade.seconds, "5min") == 300


def test_run_falls_back_to_default_handler():
    """Test clearing the handler restores the default one."""
    instance = Facade(exception_handler=lambda exc: "custom",
                      default_handler=lambda exc: "default")

    def fail():
        raise RuntimeError("fail")

    assert instance.run(fail) == "custom"

    instance.set_exception_handler(None)
    assert instance.run(fail) == "default"


def test_set_exception_handler_requires_callable(facade):
    """Test non-callable handlers are rejected."""
    with pytest.raises(TypeError):
        facade.set_exception_handler("not callable")


def test_is_cli_returns_bool():
    """Test CLI detection."""
    assert isinstance(Facade.is_cli(), bool)


def test_init_registers_default_providers(tmp_path):
    """Test init() without config files registers DateTimeHelper."""
    instance = Facade()
    instance.init(ConfigManager(tmp_path))

    assert instance.seconds("30:15") == 1815
    assert instance.is_debug() is False


def test_init_reads_config_file(tmp_path):
    """Test init() applies debug and providers from YAML."""
    config = {
        "debug": True,
        "providers": [
            "toolbelt.helpers.datetime_helper.DateTimeHelper",
            f"{__name__}.TextHelper",
        ],
    }
    (tmp_path / "toolbelt.yaml").write_text(yaml.safe_dump(config))

    instance = Facade()
    instance.init(ConfigManager(tmp_path))

    assert instance.is_debug() is True
    assert instance.shout("yaml") == "YAML"


def test_init_env_override(tmp_path, monkeypatch):
    """Test environment variables override configuration."""
    monkeypatch.setenv("TOOLBELT_TOOLBELT_DEBUG", "true")

    instance = Facade()
    instance.init(ConfigManager(tmp_path))

    assert instance.is_debug() is True


def test_init_is_repeatable(tmp_path):
    """Test initializing twice re-registers idempotently."""
    instance = Facade()
    instance.init(ConfigManager(tmp_path))
    instance.init(ConfigManager(tmp_path))

    assert len(instance.list_helpers()) == 2


def test_package_exposes_process_wide_facade():
    """Test the package-level facade instance."""
    assert isinstance(toolbelt.facade, Facade)

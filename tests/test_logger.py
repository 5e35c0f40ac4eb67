"""Behaviour of the Logger façade against the process-context sink."""

from __future__ import annotations

import pytest

from lib_log_console import Logger
from lib_log_console.config import LoggerSettings
from lib_log_console.domain.colors import blue, gray, green, red, yellow
from lib_log_console.domain.levels import LogLevel

from conftest import FixedClock, RecordingSink

TS = "12:34:56:789"


@pytest.fixture
def enabled(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEBUG", "true")


def test_info_writes_exact_line_to_stdout(enabled, capsys, fixed_clock) -> None:
    Logger("parser", clock=fixed_clock).info("hello")

    captured = capsys.readouterr()
    assert captured.out == f"{gray(TS)} {blue('[parser]')} hello\n"
    assert captured.err == ""


def test_every_level_uses_its_format_and_stream(enabled, capsys, fixed_clock) -> None:
    logger = Logger("parser", clock=fixed_clock)

    logger.debug("details")
    logger.info("hello world")
    logger.success("ok!")
    logger.warning("simple warning")
    logger.error("oops")

    captured = capsys.readouterr()
    assert captured.out == (
        f"{gray(TS)} {gray('[parser]')} {gray('details')}\n"
        f"{gray(TS)} {blue('[parser]')} hello world\n"
        f"{green(TS)} {green('✔ [parser]')} ok!\n"
    )
    assert captured.err == (
        f"{yellow(TS)} {yellow('⚠ [parser]')} simple warning\n"
        f"{red(TS)} {red('✖ [parser]')} oops\n"
    )


def test_warn_is_an_alias_of_warning(enabled, capsys, fixed_clock) -> None:
    Logger("parser", clock=fixed_clock).warn("aliased")

    assert capsys.readouterr().err == f"{yellow(TS)} {yellow('⚠ [parser]')} aliased\n"


def test_positionals_are_interpolated_in_process_context(enabled, capsys, fixed_clock) -> None:
    Logger("parser", clock=fixed_clock).info("parsed %d files in %s", 3, {"dir": "src"})

    assert capsys.readouterr().out == f"{gray(TS)} {blue('[parser]')} parsed 3 files in {{\"dir\":\"src\"}}\n"


def test_non_string_messages_are_serialised(enabled, capsys, fixed_clock) -> None:
    logger = Logger("parser", clock=fixed_clock)
    logger.info({"a": 1})
    logger.info(None)
    logger.info()

    lines = capsys.readouterr().out.splitlines()
    assert [line.rsplit(" ", 1)[-1] for line in lines] == ['{"a":1}', "null", "undefined"]


@pytest.mark.parametrize("method", ["debug", "info", "success", "warning", "warn", "error"])
def test_disabled_logger_is_silent(capsys, fixed_clock, method: str) -> None:
    logger = Logger("parser", clock=fixed_clock)

    getattr(logger, method)("nothing")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""
    assert logger.enabled is False
    assert logger.levels == frozenset()


def test_disabled_logger_does_no_work(recording_sink) -> None:
    clock = FixedClock()
    logger = Logger("parser", sink=recording_sink, clock=clock)

    stop = logger.info("skipped")
    stop("still skipped")
    logger.error("skipped")

    assert recording_sink.writes == []
    assert clock.monotonic_calls == 0


@pytest.mark.parametrize("selector", ["1", "true"])
def test_enable_all_selectors(monkeypatch, recording_sink, fixed_clock, selector: str) -> None:
    monkeypatch.setenv("DEBUG", selector)
    logger = Logger("anything", sink=recording_sink, clock=fixed_clock)

    logger.info("on")

    assert logger.enabled is True
    assert len(recording_sink.writes) == 1


def test_debug_selector_matches_name_prefix(monkeypatch, recording_sink, fixed_clock) -> None:
    monkeypatch.setenv("DEBUG", "parser")

    Logger("parser:lexer", sink=recording_sink, clock=fixed_clock).info("child on")
    Logger("http", sink=recording_sink, clock=fixed_clock).info("other off")

    assert [write[1].endswith("child on") for write in recording_sink.writes] == [True]


def test_level_selector_enables_exactly_one_level(monkeypatch, capsys, fixed_clock) -> None:
    monkeypatch.setenv("DEBUG", "1")
    monkeypatch.setenv("LOG_LEVEL", "warning")
    logger = Logger("parser", clock=fixed_clock)

    logger.debug("d")
    logger.info("i")
    logger.success("s")
    logger.warning("w")
    logger.error("e")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == f"{yellow(TS)} {yellow('⚠ [parser]')} w\n"
    assert logger.levels == frozenset({LogLevel.WARNING})


def test_level_selector_warn_alias_gates_warning(monkeypatch, recording_sink, fixed_clock) -> None:
    monkeypatch.setenv("DEBUG", "1")
    monkeypatch.setenv("LOG_LEVEL", "warn")
    logger = Logger("parser", sink=recording_sink, clock=fixed_clock)

    logger.warning("a")
    logger.warn("b")
    logger.error("c")

    assert [channel for channel, _, _ in recording_sink.writes] == ["warn", "warn"]


def test_level_selector_error_is_not_a_threshold(monkeypatch, recording_sink, fixed_clock) -> None:
    monkeypatch.setenv("DEBUG", "1")
    monkeypatch.setenv("LOG_LEVEL", "info")
    logger = Logger("parser", sink=recording_sink, clock=fixed_clock)

    logger.info("shown")
    logger.warning("hidden")
    logger.error("hidden")

    assert len(recording_sink.writes) == 1
    assert logger.is_level_enabled("info")
    assert not logger.is_level_enabled(LogLevel.ERROR)


def test_unknown_level_selector_silences_everything(monkeypatch, recording_sink, fixed_clock) -> None:
    monkeypatch.setenv("DEBUG", "1")
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    logger = Logger("parser", sink=recording_sink, clock=fixed_clock)

    for method in ("debug", "info", "success", "warning", "error"):
        getattr(logger, method)("x")

    assert recording_sink.writes == []
    assert logger.enabled is True


def test_gating_is_fixed_at_construction(monkeypatch, recording_sink, fixed_clock) -> None:
    logger = Logger("parser", sink=recording_sink, clock=fixed_clock)
    monkeypatch.setenv("DEBUG", "1")

    logger.info("still off")

    assert recording_sink.writes == []


def test_extend_builds_colon_joined_name(enabled, capsys, fixed_clock) -> None:
    child = Logger("parser", clock=fixed_clock).extend("x")

    child.info("from child")

    assert child.name == "parser:x"
    assert child.prefix == "[parser:x]"
    assert capsys.readouterr().out == f"{gray(TS)} {blue('[parser:x]')} from child\n"


def test_extend_reevaluates_gating(monkeypatch, recording_sink, fixed_clock) -> None:
    parent = Logger("parser", sink=recording_sink, clock=fixed_clock)
    monkeypatch.setenv("DEBUG", "parser:x")

    child = parent.extend("x")
    sibling = parent.extend("y")

    assert parent.enabled is False
    assert child.enabled is True
    assert sibling.enabled is False


def test_only_runs_callback_once_when_enabled(enabled) -> None:
    calls: list[int] = []
    Logger("parser").only(lambda: calls.append(1))
    assert calls == [1]


def test_only_runs_regardless_of_level_selector(monkeypatch) -> None:
    monkeypatch.setenv("DEBUG", "1")
    monkeypatch.setenv("LOG_LEVEL", "error")
    calls: list[int] = []
    Logger("parser").only(lambda: calls.append(1))
    assert calls == [1]


def test_only_skips_callback_when_disabled() -> None:
    calls: list[int] = []
    Logger("parser").only(lambda: calls.append(1))
    assert calls == []


def test_info_returns_duration_logger(enabled, capsys) -> None:
    clock = FixedClock(readings=[1.0, 1.25])
    stop = Logger("parser", clock=clock).info("start")

    stop("done")

    assert capsys.readouterr().out.splitlines() == [
        f"{gray(TS)} {blue('[parser]')} start",
        f"{gray(TS)} {blue('[parser]')} done {gray('250.00ms')}",
    ]


def test_duration_logger_respects_positionals(enabled, recording_sink) -> None:
    clock = FixedClock(readings=[2.0, 2.5])
    stop = Logger("parser", sink=recording_sink, clock=clock).info("start")

    stop("finished %s", "job")

    channel, line, positionals = recording_sink.writes[-1]
    assert channel == "log"
    assert line.endswith(f"finished %s {gray('500.00ms')}")
    assert positionals == ("job",)


def test_duration_logger_is_noop_when_info_is_gated(monkeypatch, recording_sink) -> None:
    monkeypatch.setenv("DEBUG", "1")
    monkeypatch.setenv("LOG_LEVEL", "error")
    stop = Logger("parser", sink=recording_sink, clock=FixedClock()).info("start")

    stop("done")

    assert recording_sink.writes == []


def test_explicit_settings_override_environment(monkeypatch, recording_sink, fixed_clock) -> None:
    monkeypatch.setenv("DEBUG", "1")
    logger = Logger("parser", sink=recording_sink, clock=fixed_clock, settings=LoggerSettings())

    logger.error("hidden")

    assert recording_sink.writes == []


def test_repr_names_the_logger() -> None:
    assert repr(Logger("parser")) == "Logger('parser')"


def test_uses_console_sink_channels(enabled, fixed_clock) -> None:
    sink = RecordingSink()
    logger = Logger("ui", sink=sink, clock=fixed_clock)

    logger.success("s")
    logger.warning("w")
    logger.error("e")

    assert [channel for channel, _, _ in sink.writes] == ["log", "warn", "error"]


def test_unencodable_mapping_keys_do_not_break_logging(enabled, recording_sink, fixed_clock) -> None:
    Logger("p", sink=recording_sink, clock=fixed_clock).info({("a", "b"): 1})

    _, line, _ = recording_sink.writes[0]
    assert line.endswith("{('a', 'b'): 1}")


@pytest.mark.parametrize("selector", ["WARNING", " warning ", "Info"])
def test_level_selector_is_compared_exactly(monkeypatch, recording_sink, fixed_clock, selector: str) -> None:
    monkeypatch.setenv("DEBUG", "1")
    monkeypatch.setenv("LOG_LEVEL", selector)
    logger = Logger("parser", sink=recording_sink, clock=fixed_clock)

    for method in ("debug", "info", "success", "warning", "error"):
        getattr(logger, method)("x")

    assert recording_sink.writes == []
    assert logger.levels == frozenset()

import pytest

from calc_log import CalculationLog
from errors import CalculationError, ErrorKind, Field, ValidationError
from orchestrator import Orchestrator, RequestState
from results import Err, Ok


@pytest.fixture
def app(memory_store, recording_surface):
    orchestrator = Orchestrator(CalculationLog(memory_store), recording_surface)
    orchestrator.start()
    return orchestrator


def test_multiply_success_appends_entry(app, recording_surface):
    outcome = app.calculate("6", "3", "3")
    assert outcome.state is RequestState.SUCCEEDED
    assert outcome.result == Ok(18.0)
    assert len(app.log) == 1
    assert outcome.entry.symbol == "×"
    assert outcome.entry.op == "3"
    assert ("render", 18.0) in recording_surface.calls
    assert recording_surface.view == [outcome.entry]


def test_divide_by_zero_creates_no_entry(app, recording_surface):
    outcome = app.calculate("10", "0", "4")
    assert outcome.state is RequestState.REJECTED
    assert outcome.result.kind is ErrorKind.DIVISION_BY_ZERO
    assert len(app.log) == 0
    rendered = recording_surface.calls_named("render")
    assert rendered == [("render", CalculationError(ErrorKind.DIVISION_BY_ZERO))]
    assert recording_surface.calls_named("render_log_entry") == []


def test_invalid_operator_gets_its_own_message(app, recording_surface):
    zero = app.calculate("1", "0", "4").result.error
    invalid = app.calculate("1", "0", "%").result.error
    assert invalid.kind is ErrorKind.INVALID_OPERATOR
    assert invalid.message != zero.message
    assert len(app.log) == 0


def test_validation_failure_marks_field(app, recording_surface):
    outcome = app.calculate("3", "abc", "1")
    assert outcome.state is RequestState.REJECTED
    assert isinstance(outcome.result, Err)
    assert recording_surface.calls_named("mark_invalid_field") == [("mark_invalid_field", Field.SECOND)]
    assert recording_surface.calls_named("render") == [
        ("render", ValidationError(ErrorKind.NOT_FINITE_NUMBER, Field.SECOND))
    ]
    assert len(app.log) == 0


def test_state_returns_to_idle(app):
    assert app.state is RequestState.IDLE
    app.calculate("1", "2", "1")
    assert app.state is RequestState.IDLE
    app.calculate("", "2", "1")
    assert app.state is RequestState.IDLE


def test_alias_operator_is_logged_under_stable_token(app):
    entry = app.calculate("8", "2", "/").entry
    assert entry.op == "4"
    assert entry.symbol == "÷"
    assert entry.result == 4.0


def test_start_renders_existing_entries_newest_first(memory_store, recording_surface):
    seed = CalculationLog(memory_store)
    first = seed.add(1, 1, "1", "+", 2)
    second = seed.add(2, 2, "1", "+", 4)

    app = Orchestrator(CalculationLog(memory_store), recording_surface)
    app.start()
    assert recording_surface.view == [second, first]


def test_load_entry_fills_inputs_and_recomputes(app, recording_surface):
    entry = app.calculate("6", "3", "3").entry
    recording_surface.calls.clear()

    result = app.load_entry(entry.id)
    assert result == Ok(18.0)
    assert recording_surface.calls == [("show_inputs", 6.0, 3.0), ("render", 18.0)]
    assert len(app.log) == 1


def test_load_unknown_entry(app):
    assert app.load_entry(999) is None


def test_delete_entry_updates_view(app, recording_surface):
    entry = app.calculate("1", "2", "1").entry
    assert app.delete_entry(entry.id) is True
    assert app.delete_entry(entry.id) is False
    assert recording_surface.calls_named("remove_log_entry_from_view") == [
        ("remove_log_entry_from_view", entry.id)
    ]
    assert recording_surface.view == []


def test_clear_log(app, recording_surface, memory_store):
    app.calculate("1", "2", "1")
    app.calculate("3", "4", "2")
    app.clear_log()
    assert len(app.log) == 0
    assert recording_surface.view == []
    assert CalculationLog(memory_store).load() == []


def test_save_failure_is_surfaced_as_warning(flaky_store, recording_surface):
    app = Orchestrator(CalculationLog(flaky_store), recording_surface)
    app.start()
    flaky_store.fail_set = True
    outcome = app.calculate("2", "3", "1")
    assert outcome.succeeded
    assert len(app.log) == 1
    warnings = recording_surface.calls_named("render_warning")
    assert len(warnings) == 1
    assert warnings[0][1].kind is ErrorKind.SAVE_FAILED


def test_missing_surface_does_not_block_arithmetic(memory_store):
    app = Orchestrator(CalculationLog(memory_store), surface=None)
    app.start()
    outcome = app.calculate("6", "3", "3")
    assert outcome.result == Ok(18.0)
    assert len(app.log) == 1
    assert app.internal_errors
    assert all(e.kind is ErrorKind.MISSING_PRESENTATION_TARGET for e in app.internal_errors)


def test_surface_missing_one_method(memory_store):
    class ResultOnly:
        def __init__(self):
            self.rendered = []

        def render(self, result):
            self.rendered.append(result)

    surface = ResultOnly()
    app = Orchestrator(CalculationLog(memory_store), surface)
    app.calculate("2", "2", "1")
    assert surface.rendered == [4.0]
    assert [e.message for e in app.internal_errors] == ["Sunum hedefi yok: render_log_entry"]


def test_existing_warning_handler_is_kept(flaky_store, recording_surface):
    seen = []
    log = CalculationLog(flaky_store, warning_handler=seen.append)
    app = Orchestrator(log, recording_surface)
    flaky_store.fail_set = True
    app.calculate("2", "3", "1")
    assert [e.kind for e in seen] == [ErrorKind.SAVE_FAILED]
    assert len(recording_surface.calls_named("render_warning")) == 1
